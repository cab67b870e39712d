"""Tests for FrameBuilder and FrameLayout."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

import pytest

from cluster_bridge.encoder.builder import (
    LAYOUTS,
    SAFETY_LAYOUT,
    STANDARD_LAYOUT,
    FrameBuilder,
    FrameLayout,
)
from cluster_bridge.encoder.models import NormalizedFrame


def make_frame(**overrides) -> NormalizedFrame:
    base = dict(
        ignition=1,
        engine_running=1,
        oil_temperature=96,
        lights_side=1,
        lights_dip=1,
        lights_main=0,
        lights_front_fog=0,
        lights_rear_fog=0,
        lights_indicators=2,
        rpm=3150,
        speed=87,
        fuel=64,
        engine_temperature=91,
        handbrake=0,
        abs=1,
        airbag=0,
        seatbelt=0,
        current_gear=4,
        gear_mode="M",
        timestamp=datetime(2024, 3, 9, 7, 5, 2),
    )
    base.update(overrides)
    return NormalizedFrame(**base)


def test_standard_layout_line():
    line = FrameBuilder(STANDARD_LAYOUT).build(make_frame())
    assert line == "SH;1;1;96;1;1;0;0;0;2;3150;87;64;91;0;4;M;2024;03;09;07;05;02\n"


def test_safety_layout_line():
    line = FrameBuilder(SAFETY_LAYOUT).build(make_frame())
    assert line == "SH;1;1;1;1;0;0;0;2;3150;87;64;91;0;1;0;0;4;M;2024;03;09;07;05;02\n"


@pytest.mark.parametrize("layout", list(LAYOUTS.values()))
def test_token_count_matches_layout(layout):
    line = FrameBuilder(layout).build(make_frame())
    assert line.endswith("\n")
    assert line.count("\n") == 1
    assert len(line[:-1].split(layout.delimiter)) == layout.field_count


def test_standard_layout_has_23_tokens():
    assert STANDARD_LAYOUT.field_count == 23


def test_time_fields_zero_padded():
    frame = make_frame(timestamp=datetime(987, 1, 2, 3, 4, 5))
    tokens = FrameBuilder().build(frame).rstrip("\n").split(";")
    assert tokens[-6:] == ["0987", "01", "02", "03", "04", "05"]


def test_custom_delimiter_and_tag():
    layout = FrameLayout(name="mini", fields=("rpm", "gear_mode"), tag="X1", delimiter="|")
    assert FrameBuilder(layout).build(make_frame()) == "X1|3150|M\n"


def test_layout_rejects_unknown_field():
    with pytest.raises(ValueError, match="Unknown frame field"):
        FrameLayout(name="bad", fields=("rpm", "boost"))


@pytest.mark.parametrize("delimiter", ["", ";;", "a", "7", "\n", "\u00a7"])
def test_layout_rejects_bad_delimiter(delimiter):
    with pytest.raises(ValueError):
        FrameLayout(name="bad", fields=("rpm",), delimiter=delimiter)


def test_layout_rejects_tag_containing_delimiter():
    with pytest.raises(ValueError):
        replace(STANDARD_LAYOUT, tag="S;H")


def test_output_is_printable_ascii():
    line = FrameBuilder().build(make_frame())
    assert line[:-1].isascii() and line[:-1].isprintable()


@pytest.mark.parametrize("tag", ["S\u0124", "SH\t"])
def test_layout_rejects_non_ascii_or_unprintable_tag(tag):
    with pytest.raises(ValueError, match="printable ASCII"):
        FrameLayout(name="bad", fields=("rpm",), tag=tag)
