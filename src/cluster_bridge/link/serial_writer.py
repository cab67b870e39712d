"""Serial frame writer — pyserial wrapper with NullFrameWriter for tests."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

_logger = logging.getLogger(__name__)


def _default_serial_factory(port: str, baudrate: int, timeout: float) -> Any:
    """Return an open ``serial.Serial`` on *port*."""
    import serial  # lazy import — pyserial is only needed with real hardware

    return serial.Serial(port=port, baudrate=baudrate, timeout=timeout, write_timeout=timeout)


class NullFrameWriter:
    """No-op writer; records lines for test assertions and dry runs."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write(self, line: str) -> bool:
        self.lines.append(line)
        return True

    def close(self) -> None:
        pass


class SerialFrameWriter:
    """Writes frame lines to the cluster's serial port.

    The port is opened lazily and re-opened on the next write after any
    failure, so unplugging the cluster never stops the pump.

    Parameters
    ----------
    port:
        Device name, e.g. ``"/dev/ttyUSB0"`` or ``"COM3"``.
    baudrate:
        Line speed expected by the cluster firmware.
    timeout:
        Read/write timeout in seconds.
    serial_factory:
        ``(port, baudrate, timeout) -> serial.Serial``. Injected for
        testability; defaults to pyserial.
    """

    def __init__(
        self,
        port: str,
        baudrate: int = 115200,
        timeout: float = 1.0,
        serial_factory: Callable[[str, int, float], Any] | None = None,
    ) -> None:
        self._port = port
        self._baudrate = baudrate
        self._timeout = timeout
        self._factory = serial_factory or _default_serial_factory
        self._serial: Any | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self._serial is not None

    def open(self) -> bool:
        """Open the port if needed. Returns False on failure (never raises)."""
        if self._serial is not None:
            return True
        try:
            self._serial = self._factory(self._port, self._baudrate, self._timeout)
        except OSError as exc:  # serial.SerialException is an OSError
            _logger.warning("Cannot open %s: %s", self._port, exc)
            return False
        _logger.info("Opened %s at %d baud", self._port, self._baudrate)
        return True

    def write(self, line: str) -> bool:
        """Send *line* as ASCII. Returns False if the port is unavailable."""
        if not self.open():
            return False
        try:
            self._serial.write(line.encode("ascii"))
        except OSError as exc:
            _logger.warning("Write to %s failed: %s", self._port, exc)
            self.close()
            return False
        return True

    def close(self) -> None:
        """Close the port; safe to call when already closed."""
        if self._serial is None:
            return
        ser, self._serial = self._serial, None
        try:
            ser.close()
        except OSError as exc:
            _logger.debug("Ignoring error closing %s: %s", self._port, exc)
        _logger.info("Closed %s", self._port)
