"""Injector orifice sizing for Oilfire.

Each propellant is fed through a ring of plain circular holes.  The total
orifice area follows from the incompressible orifice equation with a
fixed discharge coefficient and pressure drop; the area is then shared
equally among the holes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from oilfire.core.nozzle import circle_diameter
from oilfire.utils.constants import G_C, IN_PER_FT, INJECTOR_CD, INJECTOR_DELTA_P, OXYGEN_DENSITY


@dataclass(frozen=True)
class OrificeSizing:
    """Orifice sizing for one propellant (feet)."""

    flow_area: float  # ft², all holes
    hole_count: int
    hole_area: float  # ft²
    hole_diameter: float  # ft


@dataclass(frozen=True)
class InjectorDesign:
    """Fuel and oxidizer orifice sizing."""

    fuel: OrificeSizing
    oxidizer: OrificeSizing


def orifice_area_from_flow(
    mass_flow: float,
    density: float,
    cd: float = INJECTOR_CD,
    dp: float = INJECTOR_DELTA_P,
) -> float:
    """Required total orifice area [ft²] for a mass flow.

    ṁ = Cd · A · √(2 · g · ρ · ΔP)

    ΔP is given in psi; the factor 12 converts √(psi) to √(psf), keeping
    the relation in lbm, ft and s.

    Args:
        mass_flow: Propellant flow [lbm/s].
        density: Propellant density [lbm/ft³].
        cd: Discharge coefficient.
        dp: Pressure drop across the orifice [psi].
    """
    return mass_flow / (cd * math.sqrt(2.0 * G_C * density * dp) * IN_PER_FT)


def orifice_mass_flow(
    area: float,
    density: float,
    cd: float = INJECTOR_CD,
    dp: float = INJECTOR_DELTA_P,
) -> float:
    """Mass flow [lbm/s] through an orifice area [ft²]."""
    return cd * area * math.sqrt(2.0 * G_C * density * dp) * IN_PER_FT


def size_orifices(mass_flow: float, density: float, hole_count: int) -> OrificeSizing:
    """Size the holes for one propellant.

    Raises:
        ValueError: If *hole_count* is not positive.
    """
    if hole_count <= 0:
        raise ValueError(f"hole_count must be positive, got {hole_count}")
    total = orifice_area_from_flow(mass_flow, density)
    per_hole = total / hole_count
    return OrificeSizing(
        flow_area=total,
        hole_count=hole_count,
        hole_area=per_hole,
        hole_diameter=circle_diameter(per_hole),
    )


def size_injector(
    fuel_flow: float,
    oxidizer_flow: float,
    fuel_density: float,
    fuel_holes: int,
    oxidizer_holes: int,
) -> InjectorDesign:
    """Size fuel and gaseous-oxygen orifices.

    Args:
        fuel_flow: Fuel flow [lbm/s].
        oxidizer_flow: Oxygen flow [lbm/s].
        fuel_density: Fuel density [lbm/ft³].
        fuel_holes: Number of fuel holes.
        oxidizer_holes: Number of oxygen holes.
    """
    return InjectorDesign(
        fuel=size_orifices(fuel_flow, fuel_density, fuel_holes),
        oxidizer=size_orifices(oxidizer_flow, OXYGEN_DENSITY, oxidizer_holes),
    )
