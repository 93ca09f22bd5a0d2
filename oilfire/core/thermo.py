"""Combustion and propellant flow calculations.

Flame temperature and specific impulse come from the tabulated fuel data
(clamped linear interpolation); the propellant flows follow from thrust,
Isp and the mixture ratio.  Imperial units throughout.
"""

from __future__ import annotations

from dataclasses import dataclass

from oilfire.core.fuels import FuelProfile
from oilfire.utils.interpolation import clamped_interp


@dataclass(frozen=True)
class CombustionState:
    """Chamber conditions and propellant flow split."""

    chamber_temperature: float  # °R
    specific_impulse: float  # s
    total_flow: float  # lbm/s
    fuel_flow: float  # lbm/s
    oxidizer_flow: float  # lbm/s


def flame_temperature(profile: FuelProfile, mixture_ratio: float) -> float:
    """Adiabatic flame temperature [°R] at the given O/F ratio."""
    return clamped_interp(profile.flame_temperature, mixture_ratio)


def specific_impulse(profile: FuelProfile, chamber_pressure: float) -> float:
    """Specific impulse [s] at the given chamber pressure [psi]."""
    return clamped_interp(profile.specific_impulse, chamber_pressure)


def split_flow(total_flow: float, mixture_ratio: float) -> tuple[float, float]:
    """Split a total propellant flow into (fuel, oxidizer) flows.

    The oxidizer flow is taken as the remainder so the two always sum to
    the total.
    """
    fuel = total_flow / (mixture_ratio + 1.0)
    return fuel, total_flow - fuel


def compute_combustion(
    profile: FuelProfile,
    thrust: float,
    chamber_pressure: float,
    mixture_ratio: float,
) -> CombustionState:
    """Chamber temperature, Isp and propellant flows for an operating point.

    Args:
        profile: Fuel data.
        thrust: Design thrust [lbf].
        chamber_pressure: Chamber pressure [psi].
        mixture_ratio: O/F mass ratio.

    Returns:
        CombustionState.
    """
    tc = flame_temperature(profile, mixture_ratio)
    isp = specific_impulse(profile, chamber_pressure)
    total = thrust / isp
    fuel, oxidizer = split_flow(total, mixture_ratio)
    return CombustionState(
        chamber_temperature=tc,
        specific_impulse=isp,
        total_flow=total,
        fuel_flow=fuel,
        oxidizer_flow=oxidizer,
    )
