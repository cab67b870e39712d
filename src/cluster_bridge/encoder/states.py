"""Discrete state encoder — gear, turn indicators and lamps."""

from __future__ import annotations

import math
import re
from typing import Any

from cluster_bridge.encoder import fields
from cluster_bridge.encoder.models import GearState, LightState
from cluster_bridge.encoder.normalizer import to_flag_int
from cluster_bridge.encoder.resolver import resolve

MAX_GEAR_INDEX = 8

REVERSE = GearState(0, "R")
NEUTRAL = GearState(1, "N")
PARK = GearState(1, "P")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

INDICATORS_OFF = 0
INDICATOR_LEFT = 1
INDICATOR_RIGHT = 2
INDICATORS_HAZARD = 3


def _leading_int(raw: Any) -> int | None:
    """Integer prefix of *raw* (``5``, ``5.7``, ``"5th"`` → 5), or None."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    if isinstance(raw, str):
        m = _LEADING_INT.match(raw)
        return int(m.group(1)) if m else None
    return None


def _is_number(raw: Any, target: int) -> bool:
    return not isinstance(raw, bool) and isinstance(raw, (int, float)) and raw == target


def encode_gear(raw: Any, reverse: bool = False) -> GearState:
    """Map a raw gear value of unknown shape to a :class:`GearState`.

    Rules, first match wins:

    * ``"R"``, ``-1`` or *reverse* set → ``(0, "R")``
    * ``"N"``, ``0`` or None → ``(1, "N")``
    * ``"P"`` → ``(1, "P")``
    * integer prefix ``n >= 1`` → ``(min(n + 1, 8), "M")``
    * anything else → ``(1, "N")``
    """
    if raw == "R" or _is_number(raw, -1) or reverse:
        return REVERSE
    if raw is None or raw == "N" or _is_number(raw, 0):
        return NEUTRAL
    if raw == "P":
        return PARK

    n = _leading_int(raw)
    if n is not None and n >= 1:
        return GearState(min(n + 1, MAX_GEAR_INDEX), "M")
    return NEUTRAL


def encode_indicators(left: bool, right: bool) -> int:
    """0 = off, 1 = left, 2 = right, 3 = hazard (both, regardless of order)."""
    if left and right:
        return INDICATORS_HAZARD
    if left:
        return INDICATOR_LEFT
    if right:
        return INDICATOR_RIGHT
    return INDICATORS_OFF


def encode_lights(snapshot: Any) -> LightState:
    """Resolve each lamp across every known schema. Rear fog has no source."""
    return LightState(
        side=to_flag_int(resolve(snapshot, fields.LIGHTS_SIDE)),
        dip=to_flag_int(resolve(snapshot, fields.LIGHTS_DIP)),
        main=to_flag_int(resolve(snapshot, fields.LIGHTS_MAIN)),
        front_fog=to_flag_int(resolve(snapshot, fields.LIGHTS_FRONT_FOG)),
    )
