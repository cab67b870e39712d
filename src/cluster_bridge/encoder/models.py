"""Encoder output models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class GearState:
    """Cluster gear display: position index plus mode tag."""

    current_gear: int
    """0 = reverse, 1 = neutral/park, 2-8 = forward gears 1-7+."""

    mode: str
    """One of ``"R"``, ``"N"``, ``"P"``, ``"M"``."""


@dataclass(frozen=True)
class LightState:
    """Lamp states, each 0 or 1."""

    side: int
    dip: int
    main: int
    front_fog: int
    rear_fog: int = 0


@dataclass(frozen=True)
class NormalizedFrame:
    """One tick of cluster-ready values, all integers or single-char tags.

    Built only by :class:`~cluster_bridge.encoder.frame_encoder.FrameEncoder`;
    carries no identity beyond the snapshot it came from.
    """

    ignition: int
    engine_running: int
    oil_temperature: int
    lights_side: int
    lights_dip: int
    lights_main: int
    lights_front_fog: int
    lights_rear_fog: int
    lights_indicators: int
    rpm: int
    speed: int
    fuel: int
    engine_temperature: int
    handbrake: int
    abs: int
    airbag: int
    seatbelt: int
    current_gear: int
    gear_mode: str
    timestamp: datetime

    @property
    def year(self) -> int:
        return self.timestamp.year

    @property
    def month(self) -> int:
        return self.timestamp.month

    @property
    def day(self) -> int:
        return self.timestamp.day

    @property
    def hour(self) -> int:
        return self.timestamp.hour

    @property
    def minute(self) -> int:
        return self.timestamp.minute

    @property
    def second(self) -> int:
        return self.timestamp.second
