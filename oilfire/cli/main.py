"""Oilfire command-line interface.

Entry point for the ``oilfire`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from oilfire import __app_name__, __version__

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug log messages.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Oilfire — liquid rocket engine sizing.

    Turns thrust, chamber pressure and propellant choice into a fully
    dimensioned engine: flows, nozzle, chamber, cooling jacket and
    injector.
    """
    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


# Import and register sub-command groups
from oilfire.cli.design_cmd import design  # noqa: E402
from oilfire.cli.sweep_cmd import sweep  # noqa: E402
from oilfire.cli.info_cmd import info  # noqa: E402

cli.add_command(design)
cli.add_command(sweep)
cli.add_command(info)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
