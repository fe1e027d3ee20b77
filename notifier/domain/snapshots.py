"""Helpers to read raw document snapshots at the handler boundary."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def first_non_empty(snapshot: Mapping[str, Any], *keys: str) -> Any:
    """Return the first value among ``keys`` that is not ``None`` or blank."""

    for key in keys:
        value = snapshot.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def optional_str(value: Any) -> str | None:
    """Return ``value`` as a stripped string, or ``None`` when empty."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def as_number(value: Any, default: float = 0) -> float:
    """Coerce ``value`` into a number, using ``default`` when it cannot be parsed."""

    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


__all__ = ["first_non_empty", "optional_str", "as_number"]
