"""Fuel property tables for Oilfire.

Empirical data for gaseous-oxygen engines burning the supported fuels:
flame temperature against mixture ratio and specific impulse against
chamber pressure, plus the fuel-independent nozzle area-ratio table.
All values are imperial (°R, psi, lbm/ft³).

The fuel set is closed.  Every :class:`Fuel` member maps explicitly to a
:class:`FuelProfile`; identifiers outside the set resolve to gasoline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from oilfire.utils.interpolation import Sample, is_strictly_ascending

logger = logging.getLogger(__name__)

# °F -> °R offset used when the tables were transcribed
_F_TO_R = 460.0


class Fuel(Enum):
    """Supported fuels, all burned with gaseous oxygen."""

    GASOLINE = "gasoline"
    ALCOHOL = "alcohol"
    ETHANOL = "ethanol"


DEFAULT_FUEL = Fuel.GASOLINE


@dataclass(frozen=True)
class FuelProfile:
    """Tabulated fuel data for one propellant combination."""

    name: str
    description: str
    density: float  # lbm/ft³
    flame_temperature: tuple[Sample, ...]  # (O/F, °R)
    specific_impulse: tuple[Sample, ...]  # (psi, s)

    def __post_init__(self) -> None:
        for label, table in (
            ("flame_temperature", self.flame_temperature),
            ("specific_impulse", self.specific_impulse),
        ):
            if not table:
                raise ValueError(f"{self.name}: {label} table is empty")
            if not is_strictly_ascending(table):
                raise ValueError(f"{self.name}: {label} samples must be strictly ascending")


GASOLINE_PROFILE = FuelProfile(
    name="gasoline",
    description="Gaseous oxygen / gasoline",
    density=44.5,
    flame_temperature=(
        (1.5, 4500.0 + _F_TO_R),
        (2.0, 5500.0 + _F_TO_R),
        (2.5, 5742.0 + _F_TO_R),
        (3.0, 5500.0 + _F_TO_R),
    ),
    specific_impulse=(
        (100.0, 220.0),
        (200.0, 244.0),
        (300.0, 260.0),
        (400.0, 270.0),
        (500.0, 279.0),
    ),
)

ALCOHOL_PROFILE = FuelProfile(
    name="alcohol",
    description="Gaseous oxygen / methyl alcohol",
    density=48.0,
    flame_temperature=(
        (1.0, 5000.0 + _F_TO_R),
        (1.2, 5220.0 + _F_TO_R),
        (1.5, 5250.0 + _F_TO_R),
        (2.0, 5000.0 + _F_TO_R),
    ),
    specific_impulse=(
        (100.0, 205.0),
        (200.0, 230.0),
        (300.0, 248.0),
        (400.0, 258.0),
        (500.0, 265.0),
    ),
)

# Chamber pressure [psi] -> nozzle exit/throat area ratio Ae/At
AREA_RATIO_TABLE: tuple[Sample, ...] = (
    (100.0, 1.79),
    (200.0, 2.74),
    (300.0, 3.65),
    (400.0, 4.6),
    (500.0, 5.28),
)

_FUEL_PROFILES: dict[Fuel, FuelProfile] = {
    Fuel.GASOLINE: GASOLINE_PROFILE,
    Fuel.ALCOHOL: ALCOHOL_PROFILE,
    # No ethanol data has been tabulated yet; it borrows the gasoline curves.
    Fuel.ETHANOL: GASOLINE_PROFILE,
}

# Nominal O/F offered by the front-end when none is given
_DEFAULT_MIXTURE_RATIOS: dict[Fuel, float] = {
    Fuel.GASOLINE: 2.5,
    Fuel.ALCOHOL: 1.2,
    Fuel.ETHANOL: 4.5,
}


def is_known_fuel(name: str | Fuel) -> bool:
    """Whether *name* identifies a member of the supported fuel set."""
    if isinstance(name, Fuel):
        return True
    return name.strip().lower() in {f.value for f in Fuel}


def resolve_fuel(name: str | Fuel) -> Fuel:
    """Map a case-insensitive fuel identifier onto :class:`Fuel`.

    Unknown identifiers resolve to :data:`DEFAULT_FUEL` with a warning
    rather than an error.
    """
    if isinstance(name, Fuel):
        return name
    key = name.strip().lower()
    for fuel in Fuel:
        if fuel.value == key:
            return fuel
    logger.warning("Unknown fuel '%s', using %s data", name, DEFAULT_FUEL.value)
    return DEFAULT_FUEL


def get_fuel_profile(name: str | Fuel) -> FuelProfile:
    """Return the :class:`FuelProfile` for a fuel identifier."""
    return _FUEL_PROFILES[resolve_fuel(name)]


def is_alias(fuel: Fuel) -> bool:
    """Whether *fuel* reuses another fuel's tabulated data."""
    return _FUEL_PROFILES[fuel].name != fuel.value


def default_mixture_ratio(name: str | Fuel) -> float:
    """Nominal O/F ratio the front-end offers for a fuel."""
    return _DEFAULT_MIXTURE_RATIOS[resolve_fuel(name)]


def list_fuels() -> list[str]:
    """Return identifiers of all supported fuels."""
    return [f.value for f in Fuel]


def get_fuel_info(name: str | Fuel) -> dict[str, Any]:
    """Summarise a fuel's data for display.

    Raises:
        KeyError: If *name* is not a supported fuel.
    """
    if not is_known_fuel(name):
        raise KeyError(f"Fuel '{name}' not found. Available: {list_fuels()}")
    fuel = resolve_fuel(name)
    profile = _FUEL_PROFILES[fuel]
    return {
        "name": fuel.value,
        "description": profile.description,
        "data_source": profile.name,
        "density": profile.density,
        "default_mixture_ratio": _DEFAULT_MIXTURE_RATIOS[fuel],
        "mixture_ratio_range": (
            profile.flame_temperature[0][0],
            profile.flame_temperature[-1][0],
        ),
        "chamber_pressure_range": (
            profile.specific_impulse[0][0],
            profile.specific_impulse[-1][0],
        ),
        "alias": is_alias(fuel),
    }
