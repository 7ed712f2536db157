"""Utility helpers for reusable functionality."""

from .datetime import (
    from_storage,
    get_app_timezone,
    now_utc,
    to_app_timezone,
    to_storage,
)

__all__ = [
    "from_storage",
    "get_app_timezone",
    "now_utc",
    "to_app_timezone",
    "to_storage",
]
