"""Clock used for server-assigned timestamps.

Timestamps move through the pipeline as aware datetimes in ``APP_TIMEZONE``
and are written to the database as naive values in that same zone.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from notifier.config import get_settings


@lru_cache(maxsize=1)
def app_timezone() -> tzinfo:
    """Zone named by ``APP_TIMEZONE``; UTC when unset or unknown."""

    name = (get_settings().app_timezone or "").strip()
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=app_timezone())


def from_storage(value: datetime | None) -> datetime | None:
    """Attach the app zone to a stored timestamp."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=app_timezone())
    return value.astimezone(app_timezone())


def to_storage(value: datetime | None) -> datetime | None:
    """Convert ``value`` to a naive timestamp in the app zone."""

    aware = from_storage(value)
    return aware.replace(tzinfo=None) if aware is not None else None


def storage_now() -> datetime:
    return now_in_app_timezone().replace(tzinfo=None)
