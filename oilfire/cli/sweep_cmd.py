"""CLI command for sizing a grid of engines."""

from __future__ import annotations

import itertools

import click
from rich.console import Console
from rich.table import Table

from oilfire.cli.params import QuantityParam, checked_fuel, make_sink, output_options
from oilfire.core.design import DesignRequest, design_engine
from oilfire.core.fuels import default_mixture_ratio
from oilfire.utils.validation import InvalidDesignRequest


@click.command("sweep")
@click.option(
    "--thrust",
    "thrusts",
    type=QuantityParam("lbf"),
    multiple=True,
    required=True,
    help="Thrust value; repeat for several.",
)
@click.option(
    "--pc",
    "pressures",
    type=QuantityParam("psi"),
    multiple=True,
    required=True,
    help="Chamber pressure value; repeat for several.",
)
@click.option("--fuel", type=str, default="gasoline", show_default=True, help="Fuel name.")
@click.option("--mr", type=float, default=None, help="Mixture ratio O/F (default depends on fuel).")
@click.option("--l-star", type=QuantityParam("inch"), default=60.0, show_default=True, help="L*.")
@click.option("--dc-dt", type=float, default=3.0, show_default=True, help="Contraction ratio Dc/Dt.")
@output_options
@click.pass_context
def sweep(
    ctx: click.Context,
    thrusts: tuple[float, ...],
    pressures: tuple[float, ...],
    fuel: str,
    mr: float | None,
    l_star: float,
    dc_dt: float,
    output_dir: str | None,
    fmt: str,
) -> None:
    """Size every combination of the given thrusts and chamber pressures."""
    console: Console = ctx.obj.get("console", Console())

    fuel = checked_fuel(fuel, console)
    if mr is None:
        mr = default_mixture_ratio(fuel)
    sink = make_sink(output_dir, fmt)

    table = Table(title=f"Design Sweep — {fuel}, O/F {mr:g}")
    table.add_column("Thrust [lbf]", justify="right")
    table.add_column("Pc [psi]", justify="right")
    table.add_column("Isp [s]", justify="right")
    table.add_column("ṁ [kg/s]", justify="right")
    table.add_column("Dt [mm]", justify="right")
    table.add_column("De [mm]", justify="right")
    table.add_column("Dc [mm]", justify="right")
    table.add_column("Lc [mm]", justify="right")
    table.add_column("Wall [mm]", justify="right")

    failures = 0
    for thrust, pc in itertools.product(thrusts, pressures):
        request = DesignRequest(
            fuel=fuel,
            thrust=thrust,
            chamber_pressure=pc,
            mixture_ratio=mr,
            l_star=l_star,
            contraction_ratio=dc_dt,
        )
        try:
            r = design_engine(request, sink=sink)
        except InvalidDesignRequest as e:
            failures += 1
            table.add_row(f"{thrust:g}", f"{pc:g}", f"[red]{e.result.errors[0].message}[/red]")
            continue
        table.add_row(
            f"{thrust:g}",
            f"{pc:g}",
            f"{r.specific_impulse:.1f}",
            f"{r.total_propellant_flow_rate:.4f}",
            f"{r.throat_diameter:.2f}",
            f"{r.exit_diameter:.2f}",
            f"{r.chamber_diameter:.2f}",
            f"{r.chamber_length:.2f}",
            f"{r.wall_thickness:.3f}",
        )

    console.print(table)
    if output_dir:
        console.print(f"\n[dim]Records saved in {output_dir}[/dim]")
    if failures == len(thrusts) * len(pressures):
        raise SystemExit(1)
