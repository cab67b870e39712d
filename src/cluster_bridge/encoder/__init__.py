"""Telemetry normalization and cluster frame encoding.

Public API
----------
FrameEncoder      - snapshot → NormalizedFrame / frame line
FrameBuilder      - NormalizedFrame → frame line for a FrameLayout
FrameLayout       - tag, delimiter and field order of a frame format
NormalizedFrame   - one tick of cluster-ready values
LAYOUTS           - built-in layouts by name ("standard", "safety")
"""

from cluster_bridge.encoder.builder import (
    LAYOUTS,
    SAFETY_LAYOUT,
    STANDARD_LAYOUT,
    FrameBuilder,
    FrameLayout,
)
from cluster_bridge.encoder.frame_encoder import FrameEncoder
from cluster_bridge.encoder.models import GearState, LightState, NormalizedFrame

__all__ = [
    "LAYOUTS",
    "SAFETY_LAYOUT",
    "STANDARD_LAYOUT",
    "FrameBuilder",
    "FrameEncoder",
    "FrameLayout",
    "GearState",
    "LightState",
    "NormalizedFrame",
]
