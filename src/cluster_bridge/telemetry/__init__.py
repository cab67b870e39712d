"""Telemetry input from the simulation host.

Public API
----------
TelemetrySnapshot   - read-only dotted-path view of one polling tick
ReplaySource        - serves recorded snapshots tick by tick
read_capture        - iterates a JSON-lines capture file
CaptureReadError    - raised on missing or malformed capture files
"""

from cluster_bridge.telemetry.replay import CaptureReadError, ReplaySource, read_capture
from cluster_bridge.telemetry.snapshot import TelemetrySnapshot

__all__ = [
    "CaptureReadError",
    "ReplaySource",
    "TelemetrySnapshot",
    "read_capture",
]
