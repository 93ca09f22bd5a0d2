"""Utility modules for Oilfire."""

from oilfire.utils.constants import G_C, R_GAS, GAMMA
from oilfire.utils.interpolation import clamped_interp, in_table_range
from oilfire.utils.units import convert

__all__ = [
    "G_C",
    "R_GAS",
    "GAMMA",
    "clamped_interp",
    "in_table_range",
    "convert",
]
