"""Helpers for stamping, storing and presenting notification times.

Times are kept in UTC everywhere below the API; the configured application
timezone only affects how ``createdAt`` is rendered.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from notification_service.config import get_settings


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the ``APP_TIMEZONE`` zone, or UTC when it cannot be resolved."""

    tz_name = (get_settings().app_timezone or "").strip()
    if not tz_name:
        return timezone.utc
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


def now_utc() -> datetime:
    return datetime.now(tz=timezone.utc)


def to_storage(value: datetime) -> datetime:
    """Return ``value`` as a naive UTC datetime for a ``DateTime`` column.

    Naive input is taken to be UTC already.
    """

    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.replace(tzinfo=None)


def from_storage(value: datetime | None) -> datetime | None:
    """Attach UTC to a naive value read from the database."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_app_timezone(value: datetime) -> datetime:
    """Express an aware ``value`` in the application timezone."""

    return value.astimezone(get_app_timezone())
