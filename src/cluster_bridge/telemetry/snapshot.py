"""TelemetrySnapshot — read-only view of one polling tick of host properties."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any


def _flatten(obj: Mapping, prefix: str, out: dict[str, Any]) -> None:
    for key, value in obj.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            _flatten(value, path, out)
        else:
            out[path] = value


class TelemetrySnapshot(Mapping):
    """Immutable mapping from dotted property paths to raw telemetry values.

    Absence is the normal case: :meth:`get` returns ``None`` for any path the
    current simulation does not publish, and nothing here raises for it.

    Parameters
    ----------
    values:
        Flat mapping of dotted path → value. Copied on construction so later
        changes by the host do not leak into this tick.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values = MappingProxyType(dict(values or {}))

    @classmethod
    def from_nested(cls, obj: Mapping[str, Any]) -> TelemetrySnapshot:
        """Build a snapshot from nested dicts, joining keys with ``"."``.

        ``{"GameRawData": {"BeamNG": {"electrics": {"oiltemp": 95}}}}`` becomes
        ``{"GameRawData.BeamNG.electrics.oiltemp": 95}``. Lists are kept as
        leaf values.
        """
        flat: dict[str, Any] = {}
        _flatten(obj, "", flat)
        return cls(flat)

    def get(self, path: str, default: Any = None) -> Any:
        """Return the value at *path*, or *default* when it is absent."""
        return self._values.get(path, default)

    def __getitem__(self, path: str) -> Any:
        return self._values[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"TelemetrySnapshot({len(self._values)} paths)"
