"""Water cooling jacket sizing for Oilfire.

The jacket is an annulus around the chamber wall.  Heat load follows from
an assumed uniform heat flux over the chamber surface; the coolant flow
from an allowed coolant temperature rise; the annulus from continuity at
the requested coolant velocity.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from oilfire.core.chamber import ChamberGeometry
from oilfire.utils.constants import (
    CHAMBER_VOLUME_FACTOR,
    COOLANT_TEMPERATURE_RISE,
    HEAT_FLUX,
    IN2_PER_FT2,
    IN_PER_FT,
    PI,
    WATER_DENSITY,
)


@dataclass(frozen=True)
class CoolingJacket:
    """Cooling jacket geometry and heat load."""

    heat_transfer_area: float  # ft²
    total_heat: float  # BTU/s
    coolant_flow: float  # lbm/s
    inner_diameter: float  # in
    outer_diameter: float  # in
    gap: float  # in


def heat_transfer_area(chamber: ChamberGeometry) -> float:
    """Cooled surface area [ft²] of the chamber outer wall.

    Lateral area of the chamber-plus-wall cylinder, scaled by the chamber
    volume factor to cover the convergent section.
    """
    outer = chamber.diameter + 2.0 * chamber.wall_thickness_ft
    return CHAMBER_VOLUME_FACTOR * (PI * outer * chamber.length)


def annulus_outer_diameter(
    mass_flow: float,
    velocity: float,
    density: float,
    inner_diameter: float,
) -> float:
    """Outer diameter [ft] of an annulus carrying *mass_flow*.

    ṁ = v · ρ · π/4 · (Do² − Di²), solved for Do.

    Args:
        mass_flow: Coolant flow [lbm/s].
        velocity: Coolant velocity [ft/s].
        density: Coolant density [lbm/ft³].
        inner_diameter: Annulus inner diameter [ft].
    """
    return math.sqrt(4.0 * mass_flow / (velocity * density * PI) + inner_diameter**2)


def size_cooling_jacket(chamber: ChamberGeometry, coolant_velocity: float) -> CoolingJacket:
    """Size the water jacket around a chamber.

    Args:
        chamber: Chamber geometry (wall thickness included).
        coolant_velocity: Target coolant velocity [ft/s].

    Returns:
        CoolingJacket.
    """
    a_ht = heat_transfer_area(chamber)
    q = HEAT_FLUX * a_ht * IN2_PER_FT2
    mdot = q / COOLANT_TEMPERATURE_RISE

    d_inner = chamber.diameter_in + 2.0 * chamber.wall_thickness
    d_outer = annulus_outer_diameter(mdot, coolant_velocity, WATER_DENSITY, d_inner / IN_PER_FT)
    d_outer *= IN_PER_FT

    return CoolingJacket(
        heat_transfer_area=a_ht,
        total_heat=q,
        coolant_flow=mdot,
        inner_diameter=d_inner,
        outer_diameter=d_outer,
        gap=(d_outer - d_inner) / 2.0,
    )
