"""Frame builder — fixed-order, delimiter-joined cluster message."""

from __future__ import annotations

from dataclasses import dataclass, fields

from cluster_bridge.encoder.models import NormalizedFrame

# Time-of-day subfields and their zero-padded widths (yyyy;MM;dd;HH;mm;ss).
TIME_FIELDS: dict[str, int] = {
    "year": 4,
    "month": 2,
    "day": 2,
    "hour": 2,
    "minute": 2,
    "second": 2,
}

_FRAME_FIELDS = frozenset(f.name for f in fields(NormalizedFrame)) - {"timestamp"}
KNOWN_FIELDS = _FRAME_FIELDS | frozenset(TIME_FIELDS)


@dataclass(frozen=True)
class FrameLayout:
    """Protocol tag, delimiter and canonical field order of one frame format.

    Raises
    ------
    ValueError
        On an unknown field name, or a delimiter that is not a single
        printable non-alphanumeric ASCII character, or a tag that is not
        printable ASCII.
    """

    name: str
    fields: tuple[str, ...]
    tag: str = "SH"
    delimiter: str = ";"

    def __post_init__(self) -> None:
        unknown = [f for f in self.fields if f not in KNOWN_FIELDS]
        if unknown:
            raise ValueError(f"Unknown frame field(s) in layout {self.name!r}: {unknown}")
        delim = self.delimiter
        if len(delim) != 1 or delim.isalnum() or not (delim.isascii() and delim.isprintable()):
            raise ValueError(f"Invalid delimiter {self.delimiter!r}")
        if not (self.tag.isascii() and self.tag.isprintable()):
            raise ValueError(f"Tag {self.tag!r} must be printable ASCII")
        if self.delimiter in self.tag:
            raise ValueError(f"Tag {self.tag!r} contains the delimiter")

    @property
    def field_count(self) -> int:
        """Tokens per frame, tag included."""
        return len(self.fields) + 1


_TIME = tuple(TIME_FIELDS)

STANDARD_LAYOUT = FrameLayout(
    name="standard",
    fields=(
        "ignition",
        "engine_running",
        "oil_temperature",
        "lights_side",
        "lights_dip",
        "lights_main",
        "lights_front_fog",
        "lights_rear_fog",
        "lights_indicators",
        "rpm",
        "speed",
        "fuel",
        "engine_temperature",
        "handbrake",
        "current_gear",
        "gear_mode",
    )
    + _TIME,
)

# Warning-lamp variant: no oil gauge, ABS/airbag/seatbelt lamps instead.
SAFETY_LAYOUT = FrameLayout(
    name="safety",
    fields=(
        "ignition",
        "engine_running",
        "lights_side",
        "lights_dip",
        "lights_main",
        "lights_front_fog",
        "lights_rear_fog",
        "lights_indicators",
        "rpm",
        "speed",
        "fuel",
        "engine_temperature",
        "handbrake",
        "abs",
        "airbag",
        "seatbelt",
        "current_gear",
        "gear_mode",
    )
    + _TIME,
)

LAYOUTS: dict[str, FrameLayout] = {
    STANDARD_LAYOUT.name: STANDARD_LAYOUT,
    SAFETY_LAYOUT.name: SAFETY_LAYOUT,
}


class FrameBuilder:
    """Serializes a :class:`NormalizedFrame` according to a :class:`FrameLayout`."""

    def __init__(self, layout: FrameLayout = STANDARD_LAYOUT) -> None:
        self._layout = layout

    @property
    def layout(self) -> FrameLayout:
        return self._layout

    def build(self, frame: NormalizedFrame) -> str:
        """Return ``tag;field;...;field\\n`` for *frame*."""
        tokens = [self._layout.tag]
        for name in self._layout.fields:
            value = getattr(frame, name)
            width = TIME_FIELDS.get(name)
            tokens.append(f"{value:0{width}d}" if width else str(value))
        return self._layout.delimiter.join(tokens) + "\n"
