"""Nozzle throat and exit sizing for Oilfire.

Throat conditions use fixed isentropic ratios for γ = 1.2; the exit area
comes from the tabulated area ratio at the chamber pressure.  Only
axisymmetric (circular) sections are supported.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from oilfire.core.fuels import AREA_RATIO_TABLE
from oilfire.utils.constants import (
    CONVERGENT_HALF_ANGLE,
    DEG_TO_RAD,
    DIVERGENT_HALF_ANGLE,
    G_C,
    GAMMA,
    IN2_PER_FT2,
    PI,
    R_GAS,
    THROAT_PRESSURE_RATIO,
    THROAT_TEMPERATURE_RATIO,
)
from oilfire.utils.interpolation import clamped_interp


@dataclass(frozen=True)
class NozzleGeometry:
    """Throat and exit conditions (imperial units)."""

    throat_temperature: float  # °R
    throat_pressure: float  # psi
    throat_area: float  # ft²
    throat_diameter: float  # ft
    area_ratio: float  # Ae/At
    exit_area: float  # ft²
    exit_diameter: float  # ft


def circle_diameter(area: float) -> float:
    """Diameter of a circle with the given area."""
    return math.sqrt(4.0 * area / PI)


def circle_area(diameter: float) -> float:
    """Area of a circle with the given diameter."""
    return PI * diameter**2 / 4.0


def area_ratio(chamber_pressure: float) -> float:
    """Tabulated nozzle exit/throat area ratio at chamber pressure [psi]."""
    return clamped_interp(AREA_RATIO_TABLE, chamber_pressure)


def throat_area(total_flow: float, throat_pressure: float, throat_temperature: float) -> float:
    """Sonic throat area [ft²].

    At = ṁ / Pt · √(R·Tt / (γ·g))

    Args:
        total_flow: Propellant mass flow [lbm/s].
        throat_pressure: Static pressure at the throat [psi].
        throat_temperature: Static temperature at the throat [°R].
    """
    pt_psf = throat_pressure * IN2_PER_FT2
    return (total_flow / pt_psf) * math.sqrt((R_GAS * throat_temperature) / (GAMMA * G_C))


def size_nozzle(
    total_flow: float,
    chamber_temperature: float,
    chamber_pressure: float,
) -> NozzleGeometry:
    """Size throat and exit for a given flow and chamber state.

    Args:
        total_flow: Propellant mass flow [lbm/s].
        chamber_temperature: Chamber (flame) temperature [°R].
        chamber_pressure: Chamber pressure [psi].

    Returns:
        NozzleGeometry.
    """
    tt = THROAT_TEMPERATURE_RATIO * chamber_temperature
    pt = THROAT_PRESSURE_RATIO * chamber_pressure
    at = throat_area(total_flow, pt, tt)
    eps = area_ratio(chamber_pressure)
    ae = eps * at
    return NozzleGeometry(
        throat_temperature=tt,
        throat_pressure=pt,
        throat_area=at,
        throat_diameter=circle_diameter(at),
        area_ratio=eps,
        exit_area=ae,
        exit_diameter=circle_diameter(ae),
    )


# --- Conical section lengths ---


def cone_length(radius_large: float, radius_small: float, half_angle: float) -> float:
    """Axial length of a conical section between two radii.

    Args:
        radius_large: Larger radius (any length unit).
        radius_small: Smaller radius (same unit).
        half_angle: Cone half-angle [degrees].

    Returns:
        Axial length in the radius unit.
    """
    return (radius_large - radius_small) / math.tan(half_angle * DEG_TO_RAD)


def convergent_length(chamber_diameter: float, throat_diameter: float) -> float:
    """Convergent cone length for the fixed 30° half-angle."""
    return cone_length(chamber_diameter / 2.0, throat_diameter / 2.0, CONVERGENT_HALF_ANGLE)


def divergent_length(exit_diameter: float, throat_diameter: float) -> float:
    """Divergent cone length for the fixed 15° half-angle."""
    return cone_length(exit_diameter / 2.0, throat_diameter / 2.0, DIVERGENT_HALF_ANGLE)
