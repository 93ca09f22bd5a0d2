"""Chamber sizing module for Oilfire.

Computes combustion chamber volume and cylinder dimensions from L*, the
throat geometry and the requested contraction ratio, and the chamber wall
thickness from thin-wall hoop stress.
"""

from __future__ import annotations

from dataclasses import dataclass

from oilfire.core.nozzle import circle_area
from oilfire.utils.constants import (
    CHAMBER_VOLUME_FACTOR,
    COPPER_ALLOWABLE_STRESS,
    IN_PER_FT,
    WALL_SAFETY_FACTOR,
)


@dataclass(frozen=True)
class ChamberGeometry:
    """Chamber geometry definition.

    Dimensions in feet unless noted.
    """

    volume: float  # ft³
    diameter: float  # ft
    area: float  # ft²
    length: float  # ft
    wall_thickness: float  # in

    @property
    def diameter_in(self) -> float:
        return self.diameter * IN_PER_FT

    @property
    def wall_thickness_ft(self) -> float:
        return self.wall_thickness / IN_PER_FT


def chamber_volume(l_star: float, throat_area: float) -> float:
    """Chamber volume [ft³] from L* [in] and throat area [ft²]."""
    return (l_star / IN_PER_FT) * throat_area


def chamber_length(volume: float, area: float) -> float:
    """Cylinder length [ft] holding *volume* at cross-section *area*.

    The divisor carries a 1.1 allowance for the convergent section, whose
    volume a straight cylinder does not account for.
    """
    return volume / (CHAMBER_VOLUME_FACTOR * area)


def wall_thickness(chamber_pressure: float, chamber_diameter_in: float) -> float:
    """Chamber wall thickness [in] from thin-wall hoop stress.

    t = Pc · Dc / S · SF, with the copper allowable stress S and a fixed
    safety factor of 3.

    Args:
        chamber_pressure: Chamber pressure [psi].
        chamber_diameter_in: Inner chamber diameter [in].
    """
    return (chamber_pressure * chamber_diameter_in / COPPER_ALLOWABLE_STRESS) * WALL_SAFETY_FACTOR


def size_chamber(
    throat_area: float,
    throat_diameter: float,
    l_star: float,
    contraction_ratio: float,
    chamber_pressure: float,
) -> ChamberGeometry:
    """Size the combustion chamber.

    Args:
        throat_area: Nozzle throat area [ft²].
        throat_diameter: Nozzle throat diameter [ft].
        l_star: Characteristic length L* [in].
        contraction_ratio: Diameter ratio Dc/Dt.
        chamber_pressure: Chamber pressure [psi], for the wall.

    Returns:
        ChamberGeometry.
    """
    vc = chamber_volume(l_star, throat_area)
    dc = contraction_ratio * throat_diameter
    ac = circle_area(dc)
    lc = chamber_length(vc, ac)
    return ChamberGeometry(
        volume=vc,
        diameter=dc,
        area=ac,
        length=lc,
        wall_thickness=wall_thickness(chamber_pressure, dc * IN_PER_FT),
    )
