"""CLI command for sizing a single engine."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from oilfire.cli.params import QuantityParam, checked_fuel, make_sink, output_options
from oilfire.core.design import DesignRequest, DesignResult, design_engine
from oilfire.core.fuels import default_mixture_ratio
from oilfire.core.records import JsonRecordSink, TextRecordSink
from oilfire.utils.validation import InvalidDesignRequest

_LABELS = {
    "total_propellant_flow_rate": "Total Propellant Flow",
    "fuel_flow_rate": "Fuel Flow",
    "oxidizer_flow_rate": "Oxidizer Flow",
    "chamber_temperature": "Chamber Temperature",
    "throat_temperature": "Throat Temperature",
    "throat_pressure": "Throat Pressure",
    "specific_impulse": "Specific Impulse",
}


def _label(name: str) -> str:
    return _LABELS.get(name, name.replace("_", " ").title())


def result_table(result: DesignResult, title: str = "Engine Design Results") -> Table:
    """Render every result field as a three-column table."""
    table = Table(title=title)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")
    for name, value, unit in result.items():
        table.add_row(_label(name), f"{value:.6g}", unit)
    return table


def print_validation_errors(console: Console, err: InvalidDesignRequest) -> None:
    for msg in err.result.errors:
        console.print(f"[red]Error:[/red] {msg.message}")


@click.command("design")
@click.option("--fuel", type=str, default="gasoline", show_default=True, help="Fuel name.")
@click.option(
    "--thrust", type=QuantityParam("lbf"), default=200.0, show_default=True, help="Design thrust."
)
@click.option(
    "--pc", type=QuantityParam("psi"), default=500.0, show_default=True, help="Chamber pressure."
)
@click.option(
    "--mr", type=float, default=None, help="Mixture ratio O/F (default depends on fuel)."
)
@click.option(
    "--l-star",
    type=QuantityParam("inch"),
    default=60.0,
    show_default=True,
    help="Characteristic length L*.",
)
@click.option(
    "--dc-dt", type=float, default=3.0, show_default=True, help="Contraction ratio Dc/Dt."
)
@click.option(
    "--coolant-velocity",
    type=QuantityParam("ft/s"),
    default=30.0,
    show_default=True,
    help="Coolant velocity in the jacket.",
)
@click.option("--fuel-holes", type=int, default=12, show_default=True, help="Fuel injector holes.")
@click.option(
    "--ox-holes", type=int, default=12, show_default=True, help="Oxidizer injector holes."
)
@output_options
@click.pass_context
def design(
    ctx: click.Context,
    fuel: str,
    thrust: float,
    pc: float,
    mr: float | None,
    l_star: float,
    dc_dt: float,
    coolant_velocity: float,
    fuel_holes: int,
    ox_holes: int,
    output_dir: str | None,
    fmt: str,
) -> None:
    """Size a complete engine from thrust, chamber pressure and fuel."""
    console: Console = ctx.obj.get("console", Console())

    fuel = checked_fuel(fuel, console)
    if mr is None:
        mr = default_mixture_ratio(fuel)

    request = DesignRequest(
        fuel=fuel,
        thrust=thrust,
        chamber_pressure=pc,
        mixture_ratio=mr,
        l_star=l_star,
        coolant_velocity=coolant_velocity,
        fuel_holes=fuel_holes,
        oxidizer_holes=ox_holes,
        contraction_ratio=dc_dt,
    )

    console.print("\n[bold]Oilfire — Engine Design[/bold]\n")
    console.print(
        f"Fuel: {request.fuel}   Thrust: {request.thrust:g} lbf   "
        f"Pc: {request.chamber_pressure:g} psi   O/F: {request.mixture_ratio:g}"
    )

    sink = make_sink(output_dir, fmt)
    try:
        result = design_engine(request, sink=sink)
    except InvalidDesignRequest as e:
        print_validation_errors(console, e)
        raise SystemExit(1)

    console.print(result_table(result))

    if isinstance(sink, (TextRecordSink, JsonRecordSink)):
        console.print(f"\n[dim]Saved to {sink.path_for(request)}[/dim]")
