"""FramePump — polls a snapshot source, encodes and writes one frame per tick."""

from __future__ import annotations

import logging
import threading
import time

_logger = logging.getLogger(__name__)


class FramePump:
    """Drives source → encoder → writer at *target_hz* on a background thread.

    Parameters
    ----------
    source:
        Object with ``read_snapshot() -> snapshot | None``.
    encoder:
        A :class:`~cluster_bridge.encoder.frame_encoder.FrameEncoder`.
    writer:
        Object with ``write(line: str) -> bool`` — either
        :class:`~cluster_bridge.link.serial_writer.SerialFrameWriter` or
        :class:`~cluster_bridge.link.serial_writer.NullFrameWriter`.
    target_hz:
        Polling frequency in Hz.
    """

    def __init__(self, source, encoder, writer, target_hz: float = 20.0) -> None:
        if target_hz <= 0:
            raise ValueError(f"target_hz must be positive, got {target_hz}")
        self._source = source
        self._encoder = encoder
        self._writer = writer
        self._interval = 1.0 / target_hz
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self.frames_sent = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def tick(self) -> str | None:
        """Encode and write one snapshot.

        Returns the frame line, or None when the source had no snapshot.
        """
        snapshot = self._source.read_snapshot()
        if snapshot is None:
            return None
        line = self._encoder.encode_line(snapshot)
        if self._writer.write(line):
            self.frames_sent += 1
        return line

    def start(self) -> None:
        """Start the background polling thread."""
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, daemon=True, name="FramePump")
        self._thread.start()

    def stop(self) -> None:
        """Signal the polling thread to stop and join it."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=2.0)
            self._thread = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _run(self) -> None:
        while not self._stop_event.is_set():
            t0 = time.monotonic()
            try:
                self.tick()
            except Exception:
                _logger.exception("Frame pump tick failed")
            elapsed = time.monotonic() - t0
            wait = self._interval - elapsed
            if wait > 0:
                self._stop_event.wait(wait)
