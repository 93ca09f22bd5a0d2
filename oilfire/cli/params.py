"""Shared click parameter types and helpers for the Oilfire CLI."""

from __future__ import annotations

from typing import Any

import click
from rich.console import Console

from oilfire.core.fuels import DEFAULT_FUEL, is_known_fuel, list_fuels
from oilfire.core.records import JsonRecordSink, ResultSink, TextRecordSink
from oilfire.utils.units import parse_quantity


class QuantityParam(click.ParamType):
    """A dimensional value: a bare number in *unit*, or a pint quantity string."""

    name = "quantity"

    def __init__(self, unit: str):
        self.unit = unit

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> float:
        try:
            return parse_quantity(value, self.unit)
        except ValueError as e:
            self.fail(str(e), param, ctx)

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        return f"[{self.unit}]"


def checked_fuel(fuel: str, console: Console) -> str:
    """Normalise a fuel name, falling back to the default for unknown names."""
    if is_known_fuel(fuel):
        return fuel.strip().lower()
    console.print(
        f"[yellow]Warning:[/yellow] unknown fuel '{fuel}' "
        f"(choose from {', '.join(list_fuels())}), defaulting to {DEFAULT_FUEL.value}."
    )
    return DEFAULT_FUEL.value


def make_sink(output_dir: str | None, fmt: str) -> ResultSink | None:
    """Sink for the requested output directory and format, if any."""
    if output_dir is None:
        return None
    if fmt == "json":
        return JsonRecordSink(output_dir)
    return TextRecordSink(output_dir)


def output_options(func):
    """Attach the shared ``--output-dir`` / ``--format`` options."""
    func = click.option(
        "--format",
        "fmt",
        type=click.Choice(["text", "json"], case_sensitive=False),
        default="text",
        show_default=True,
        help="Record format when saving.",
    )(func)
    func = click.option(
        "--output-dir",
        "-o",
        type=click.Path(file_okay=False),
        default=None,
        help="Directory to save design records in.",
    )(func)
    return func
