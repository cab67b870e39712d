"""Normalizer — numeric domain fixes applied after resolution."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +inf (``2.5 → 3``, ``-2.5 → -2``)."""
    return math.floor(value + 0.5)


def _sanitize(value: float, lo: float | None, hi: float | None) -> float:
    """Return value clamped to [lo, hi], with NaN/Inf replaced by lo (or 0)."""
    if not math.isfinite(value):
        value = lo if lo is not None else 0.0
    if lo is not None and value < lo:
        value = lo
    if hi is not None and value > hi:
        value = hi
    return value


def to_int(value: float, lo: float | None = None, hi: float | None = None) -> int:
    """Sanitize *value* into [lo, hi] and round it to an integer."""
    return round_half_up(_sanitize(value, lo, hi))


def fuel_percent(current: float, capacity: float) -> int:
    """Fuel level as an integer percentage in [0, 100].

    0 whenever *capacity* is not positive, or the ratio is NaN or negative.
    """
    if not capacity > 0:
        return 0
    pct = current / capacity * 100.0
    if math.isnan(pct) or pct < 0:
        return 0
    if pct > 100:
        return 100
    return to_int(pct, 0.0, 100.0)


def to_flag_int(value: bool | None) -> int:
    return 1 if value else 0


def to_timestamp(value: Any) -> datetime | None:
    """Accept a datetime or an ISO-8601 string; None for anything else."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    return None
