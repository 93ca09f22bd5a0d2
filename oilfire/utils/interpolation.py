"""Interpolation helpers for Oilfire."""

from __future__ import annotations

from typing import Sequence

import numpy as np

Sample = tuple[float, float]


def clamped_interp(samples: Sequence[Sample], x: float) -> float:
    """Piecewise-linear table lookup with clamping at both ends.

    Queries at or below the first sample return the first y, queries at
    or above the last sample return the last y, and a query that hits a
    tabulated x returns that sample's y exactly.  The table is never
    extrapolated.

    Args:
        samples: ``(x, y)`` pairs sorted by ascending x (at least one).
        x: Query point.

    Returns:
        Interpolated value.

    Raises:
        ValueError: If *samples* is empty.
    """
    if not samples:
        raise ValueError("Cannot interpolate an empty table")
    xp = np.fromiter((s[0] for s in samples), dtype=float, count=len(samples))
    fp = np.fromiter((s[1] for s in samples), dtype=float, count=len(samples))
    # np.interp clamps to fp[0] / fp[-1] outside [xp[0], xp[-1]]
    return float(np.interp(x, xp, fp))


def in_table_range(samples: Sequence[Sample], x: float) -> bool:
    """Whether *x* lies inside the tabulated domain of *samples*."""
    return samples[0][0] <= x <= samples[-1][0]


def is_strictly_ascending(samples: Sequence[Sample]) -> bool:
    """Whether the sample x-values are strictly increasing."""
    xs = np.array([s[0] for s in samples], dtype=float)
    return bool(np.all(np.diff(xs) > 0))
