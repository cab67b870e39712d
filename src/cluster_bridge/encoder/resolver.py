"""Source resolver — first-valid-probe lookup across heterogeneous telemetry paths."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

_TRUE_WORDS = frozenset({"true", "on", "yes", "1"})
_FALSE_WORDS = frozenset({"false", "off", "no", "0", ""})


# ---------------------------------------------------------------------------
# Coercions: raw host value → typed value, or None when absent
# ---------------------------------------------------------------------------


def to_number(value: Any) -> float | None:
    """Coerce *value* to float; None for anything that is not number-like.

    NaN and Inf pass through; the validity predicate rejects them.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return None
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def to_flag(value: Any) -> bool | None:
    """Coerce a boolean-like host value; None when it cannot be interpreted."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, float):
        if math.isnan(value):
            return None
        return value != 0
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    return None


def identity(value: Any) -> Any:
    return value


# ---------------------------------------------------------------------------
# Validity predicates
# ---------------------------------------------------------------------------


def is_present_numeric(value: Any) -> bool:
    """True for a finite number. ``0`` counts as present."""
    return value is not None and math.isfinite(value)


def is_set_flag(value: Any) -> bool:
    """True only for an asserted flag, so ``False`` falls through to the next probe."""
    return value is True


def is_present(value: Any) -> bool:
    return value is not None


# ---------------------------------------------------------------------------
# Probe / FieldSpec
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Probe:
    """One candidate telemetry path with its coercion and validity predicate."""

    path: str
    coerce: Callable[[Any], Any] = to_number
    is_valid: Callable[[Any], bool] = is_present_numeric


@dataclass(frozen=True)
class FieldSpec:
    """Ordered resolver chain for one canonical field."""

    name: str
    probes: tuple[Probe, ...]
    default: Any = 0

    @classmethod
    def numeric(cls, name: str, *paths: str, default: float = 0.0) -> FieldSpec:
        """First finite number among *paths*."""
        return cls(name, tuple(Probe(p) for p in paths), default)

    @classmethod
    def flag(cls, name: str, *paths: str) -> FieldSpec:
        """Logical OR of boolean-like signals at *paths*."""
        return cls(name, tuple(Probe(p, to_flag, is_set_flag) for p in paths), False)

    @classmethod
    def raw(cls, name: str, *paths: str) -> FieldSpec:
        """First present value among *paths*, uncoerced."""
        return cls(name, tuple(Probe(p, identity, is_present) for p in paths), None)


def resolve(snapshot: Any, spec: FieldSpec) -> Any:
    """Return the first valid coerced probe value in *spec*, else ``spec.default``.

    *snapshot* is anything with ``get(path)`` returning None for absent paths.
    Probes are evaluated lazily; later paths are not read once one succeeds.
    """
    for probe in spec.probes:
        value = probe.coerce(snapshot.get(probe.path))
        if probe.is_valid(value):
            return value
    return spec.default
