"""CLI command for listing fuels and inspecting saved records."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from oilfire.core.design import DesignResult
from oilfire.core.fuels import get_fuel_info, list_fuels
from oilfire.core.records import load_json_record


@click.group("info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """Inspect fuels and saved design records."""
    pass


@info.command("fuels")
@click.pass_context
def info_fuels(ctx: click.Context) -> None:
    """List supported fuels."""
    console: Console = ctx.obj.get("console", Console())
    table = Table(title="Supported Fuels")
    table.add_column("Name", style="cyan")
    table.add_column("Description", style="green")
    table.add_column("Density [lbm/ft³]", justify="right")
    table.add_column("Default O/F", justify="right")
    table.add_column("O/F data", justify="right")
    table.add_column("Pc data [psi]", justify="right")

    for name in list_fuels():
        fuel = get_fuel_info(name)
        lo, hi = fuel["mixture_ratio_range"]
        pc_lo, pc_hi = fuel["chamber_pressure_range"]
        description = fuel["description"]
        if fuel["alias"]:
            description += f" [yellow](uses {fuel['data_source']} data)[/yellow]"
        table.add_row(
            name,
            description,
            f"{fuel['density']:g}",
            f"{fuel['default_mixture_ratio']:g}",
            f"{lo:g}–{hi:g}",
            f"{pc_lo:g}–{pc_hi:g}",
        )
    console.print(table)


@info.command("record")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def info_record(ctx: click.Context, path: str) -> None:
    """Display a saved JSON design record."""
    console: Console = ctx.obj.get("console", Console())
    request, values = load_json_record(path)
    units = DesignResult.units()

    tree = Tree(f"[bold]{path}[/bold]")
    req = tree.add("[cyan]Request[/cyan]")
    for k, v in request.items():
        req.add(f"{k}: {v}")
    res = tree.add("[cyan]Result[/cyan]")
    for k, v in values.items():
        res.add(f"{k}: {v:.6g} {units.get(k, '')}")
    console.print(tree)
