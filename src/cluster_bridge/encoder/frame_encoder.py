"""FrameEncoder — snapshot → NormalizedFrame → cluster message line."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from cluster_bridge.encoder import fields
from cluster_bridge.encoder.builder import STANDARD_LAYOUT, FrameBuilder, FrameLayout
from cluster_bridge.encoder.models import NormalizedFrame
from cluster_bridge.encoder.normalizer import fuel_percent, to_flag_int, to_int, to_timestamp
from cluster_bridge.encoder.resolver import resolve
from cluster_bridge.encoder.states import encode_gear, encode_indicators, encode_lights


class FrameEncoder:
    """Turns one telemetry snapshot into one cluster frame.

    Stateless between calls: the same snapshot (and clock reading) always
    yields the same frame, so one instance may be shared across threads.

    Parameters
    ----------
    layout:
        Field order of the emitted line.
    clock:
        Zero-argument callable returning the current ``datetime``. Only
        consulted when the snapshot carries no date-time value.
    """

    def __init__(
        self,
        layout: FrameLayout = STANDARD_LAYOUT,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._builder = FrameBuilder(layout)
        self._clock = clock

    @property
    def layout(self) -> FrameLayout:
        return self._builder.layout

    def encode(self, snapshot: Any) -> NormalizedFrame:
        """Resolve, normalize and encode *snapshot* (anything with ``get(path)``)."""
        lights = encode_lights(snapshot)
        gear = encode_gear(
            resolve(snapshot, fields.GEAR),
            reverse=resolve(snapshot, fields.REVERSE),
        )
        timestamp = to_timestamp(resolve(snapshot, fields.CLOCK)) or self._clock()

        return NormalizedFrame(
            ignition=to_flag_int(resolve(snapshot, fields.IGNITION)),
            engine_running=to_flag_int(resolve(snapshot, fields.ENGINE_RUNNING)),
            oil_temperature=to_int(resolve(snapshot, fields.OIL_TEMPERATURE)),
            lights_side=lights.side,
            lights_dip=lights.dip,
            lights_main=lights.main,
            lights_front_fog=lights.front_fog,
            lights_rear_fog=lights.rear_fog,
            lights_indicators=encode_indicators(
                resolve(snapshot, fields.INDICATOR_LEFT),
                resolve(snapshot, fields.INDICATOR_RIGHT),
            ),
            rpm=to_int(resolve(snapshot, fields.RPM), 0.0),
            speed=to_int(resolve(snapshot, fields.SPEED), 0.0),
            fuel=fuel_percent(
                resolve(snapshot, fields.FUEL_CURRENT),
                resolve(snapshot, fields.FUEL_CAPACITY),
            ),
            engine_temperature=to_int(resolve(snapshot, fields.ENGINE_TEMPERATURE)),
            handbrake=to_flag_int(resolve(snapshot, fields.HANDBRAKE)),
            abs=to_flag_int(resolve(snapshot, fields.ABS)),
            airbag=0,
            seatbelt=0,
            current_gear=gear.current_gear,
            gear_mode=gear.mode,
            timestamp=timestamp,
        )

    def encode_line(self, snapshot: Any) -> str:
        """Encode *snapshot* and serialize it with this encoder's layout."""
        return self._builder.build(self.encode(snapshot))
