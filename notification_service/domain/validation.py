"""Presence rules shared by the store and the connection registry."""

from __future__ import annotations

from typing import Any

from .exceptions import ValidationError


def is_present(value: Any) -> bool:
    """Return ``True`` when ``value`` is a non-empty string."""

    return isinstance(value, str) and value != ""


def require_fields(**values: Any) -> None:
    """Raise :class:`ValidationError` naming every missing or empty field."""

    missing = [name for name, value in values.items() if not is_present(value)]
    if missing:
        raise ValidationError("Missing required fields", fields=missing)


__all__ = ["is_present", "require_fields"]
