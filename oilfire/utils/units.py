"""Unit conversion utilities for Oilfire.

Two layers live here:

* fixed-factor helpers that move pipeline quantities from imperial
  engineering units to SI (and back), using the factors in
  :mod:`oilfire.utils.constants` so results are reproducible bit for bit;
* a thin pint layer for parsing user-supplied quantities such as
  ``"890 N"`` or ``"34.5 bar"`` into the pipeline's input units.
"""

from __future__ import annotations

from functools import lru_cache

import pint

from oilfire.utils.constants import (
    BTU_S_TO_W,
    FT2_TO_M2,
    FT3_TO_M3,
    FT_TO_MM,
    IN_TO_MM,
    KELVIN_AT_FREEZING,
    LBM_TO_KG,
    PSI_TO_PA,
    RANKINE_AT_FREEZING,
)

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()
_ureg.formatter.default_format = "~P"  # short pretty format


Q_ = _ureg.Quantity


# --- Fixed-factor pipeline conversions ---


def lbm_s_to_kg_s(value: float) -> float:
    return value * LBM_TO_KG


def kg_s_to_lbm_s(value: float) -> float:
    return value / LBM_TO_KG


def rankine_to_kelvin(value: float) -> float:
    """Convert an absolute temperature from °R to K."""
    return (value - RANKINE_AT_FREEZING) * 5.0 / 9.0 + KELVIN_AT_FREEZING


def kelvin_to_rankine(value: float) -> float:
    return (value - KELVIN_AT_FREEZING) * 9.0 / 5.0 + RANKINE_AT_FREEZING


def psi_to_pa(value: float) -> float:
    return value * PSI_TO_PA


def pa_to_psi(value: float) -> float:
    return value / PSI_TO_PA


def ft_to_mm(value: float) -> float:
    return value * FT_TO_MM


def mm_to_ft(value: float) -> float:
    return value / FT_TO_MM


def in_to_mm(value: float) -> float:
    return value * IN_TO_MM


def mm_to_in(value: float) -> float:
    return value / IN_TO_MM


def ft2_to_m2(value: float) -> float:
    return value * FT2_TO_M2


def m2_to_ft2(value: float) -> float:
    return value / FT2_TO_M2


def ft3_to_m3(value: float) -> float:
    return value * FT3_TO_M3


def m3_to_ft3(value: float) -> float:
    return value / FT3_TO_M3


def btu_s_to_w(value: float) -> float:
    return value * BTU_S_TO_W


def w_to_btu_s(value: float) -> float:
    return value / BTU_S_TO_W


# --- pint helpers ---


def parse_quantity(text: str | float, default_unit: str) -> float:
    """Parse a user-supplied quantity into *default_unit*.

    Bare numbers (or numeric strings) are taken to be in *default_unit*
    already; anything else is parsed by pint and converted.

    Args:
        text: Value such as ``500``, ``"500"``, ``"34.5 bar"``.
        default_unit: Unit the caller works in (e.g. ``"psi"``).

    Returns:
        Magnitude in *default_unit*.

    Raises:
        ValueError: If the text cannot be parsed or has the wrong dimension.
    """
    if isinstance(text, (int, float)):
        return float(text)
    try:
        return float(text)
    except ValueError:
        pass
    try:
        quantity = _ureg.Quantity(text)
        return float(quantity.to(default_unit).magnitude)
    except (pint.errors.PintError, TypeError, SyntaxError) as e:
        raise ValueError(f"Cannot interpret '{text}' as a quantity in {default_unit}: {e}") from e


@lru_cache(maxsize=256)
def convert(value: float, from_unit: str, to_unit: str) -> float:
    """General-purpose unit conversion.

    Args:
        value: Numeric value in *from_unit*.
        from_unit: Source unit string.
        to_unit: Target unit string.

    Returns:
        Converted numeric value.
    """
    return Q_(value, from_unit).to(to_unit).magnitude
