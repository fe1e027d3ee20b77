"""Utility helpers for reusable functionality."""

from .datetime import (
    app_timezone,
    from_storage,
    now_in_app_timezone,
    storage_now,
    to_storage,
)

__all__ = [
    "app_timezone",
    "from_storage",
    "now_in_app_timezone",
    "storage_now",
    "to_storage",
]
