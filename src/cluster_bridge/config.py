"""Bridge configuration from environment variables.

Scripts call ``load_dotenv()`` first, so a ``.env`` file in the working
directory can provide any of these:

CLUSTER_BRIDGE_PORT       serial device (default ``/dev/ttyUSB0``)
CLUSTER_BRIDGE_BAUD       line speed (default 115200)
CLUSTER_BRIDGE_HZ         frames per second (default 20)
CLUSTER_BRIDGE_LAYOUT     ``standard`` or ``safety``
CLUSTER_BRIDGE_LOG_LEVEL  logging level name (default ``INFO``)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from cluster_bridge.encoder.builder import LAYOUTS, FrameLayout


class ConfigError(ValueError):
    """Raised when a configuration value is missing or malformed."""


def get_layout(name: str) -> FrameLayout:
    """Return the built-in layout called *name*."""
    try:
        return LAYOUTS[name.strip().lower()]
    except KeyError:
        raise ConfigError(
            f"Unknown layout {name!r}; expected one of {sorted(LAYOUTS)}"
        ) from None


@dataclass
class BridgeConfig:
    """Runtime settings for the serial bridge."""

    port: str = "/dev/ttyUSB0"
    baudrate: int = 115200
    target_hz: float = 20.0
    layout: str = "standard"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.baudrate <= 0:
            raise ConfigError(f"baudrate must be positive, got {self.baudrate}")
        if self.target_hz <= 0:
            raise ConfigError(f"target_hz must be positive, got {self.target_hz}")
        get_layout(self.layout)
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"Unknown log level {self.log_level!r}")

    @property
    def frame_layout(self) -> FrameLayout:
        return get_layout(self.layout)

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> BridgeConfig:
        """Build a config from *env* (defaults to ``os.environ``)."""
        env = os.environ if env is None else env
        defaults = cls()
        return cls(
            port=env.get("CLUSTER_BRIDGE_PORT", defaults.port),
            baudrate=_parse(env, "CLUSTER_BRIDGE_BAUD", int, defaults.baudrate),
            target_hz=_parse(env, "CLUSTER_BRIDGE_HZ", float, defaults.target_hz),
            layout=env.get("CLUSTER_BRIDGE_LAYOUT", defaults.layout),
            log_level=env.get("CLUSTER_BRIDGE_LOG_LEVEL", defaults.log_level),
        )


def _parse(env: Mapping[str, str], key: str, convert, default):
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return convert(raw)
    except ValueError:
        raise ConfigError(f"{key}={raw!r} is not a valid {convert.__name__}") from None
