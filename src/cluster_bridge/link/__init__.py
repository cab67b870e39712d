"""Host-side link to the instrument cluster.

Public API
----------
FramePump           - polling loop: source → encoder → writer
SerialFrameWriter   - writes frame lines over pyserial
NullFrameWriter     - records lines instead of writing (tests, dry runs)
"""

from cluster_bridge.link.pump import FramePump
from cluster_bridge.link.serial_writer import NullFrameWriter, SerialFrameWriter

__all__ = [
    "FramePump",
    "NullFrameWriter",
    "SerialFrameWriter",
]
