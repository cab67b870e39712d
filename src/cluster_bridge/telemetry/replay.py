"""Capture replay — feeds recorded JSON-lines snapshots to the frame pump."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator

from cluster_bridge.telemetry.snapshot import TelemetrySnapshot

_logger = logging.getLogger(__name__)


class CaptureReadError(Exception):
    """Raised when a capture file cannot be opened or contains a malformed line."""


def read_capture(path: str) -> Iterator[TelemetrySnapshot]:
    """Yield one :class:`TelemetrySnapshot` per non-blank line of *path*.

    Each line is a JSON object, either flat (``{"Rpms": 3000}``) or nested
    (``{"GameRawData": {"BeamNG": {...}}}``); both are flattened to dotted
    paths.

    Raises
    ------
    CaptureReadError
        If the file does not exist, or a line is not a JSON object.
    """
    if not os.path.exists(path):
        raise CaptureReadError(f"File not found: {path!r}")

    with open(path, encoding="utf-8") as fh:
        for lineno, line in enumerate(fh, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError as exc:
                raise CaptureReadError(f"{path}:{lineno}: invalid JSON: {exc.msg}") from exc
            if not isinstance(obj, dict):
                raise CaptureReadError(f"{path}:{lineno}: expected a JSON object")
            yield TelemetrySnapshot.from_nested(obj)


class ReplaySource:
    """Serves snapshots from a capture file one tick at a time.

    The whole capture is loaded (and validated) on construction so a bad file
    fails at startup rather than mid-session.

    Parameters
    ----------
    path:
        JSON-lines capture file.
    loop:
        Restart from the first snapshot once the capture is exhausted.
    """

    def __init__(self, path: str, loop: bool = False) -> None:
        self._snapshots = list(read_capture(path))
        self._loop = loop
        self._index = 0
        _logger.info("Loaded %d snapshot(s) from %s", len(self._snapshots), path)

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def exhausted(self) -> bool:
        """True once every snapshot has been served (never when looping)."""
        if self._loop and self._snapshots:
            return False
        return self._index >= len(self._snapshots)

    def read_snapshot(self) -> TelemetrySnapshot | None:
        """Return the next snapshot, or None when the capture is exhausted."""
        if not self._snapshots:
            return None
        if self._index >= len(self._snapshots):
            if not self._loop:
                if self._index == len(self._snapshots):
                    _logger.info("Capture exhausted after %d snapshot(s)", self._index)
                    self._index += 1
                return None
            self._index = 0
        snapshot = self._snapshots[self._index]
        self._index += 1
        return snapshot
