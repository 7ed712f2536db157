"""Errors raised by notification operations."""

from __future__ import annotations


class NotificationError(Exception):
    """Base class for failures of notification operations."""


class ValidationError(NotificationError):
    """A required field is missing or empty."""

    def __init__(self, message: str, *, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []


InvalidRequest = ValidationError


class NotFoundError(NotificationError):
    """The notification identifier does not resolve to a stored record."""

    def __init__(self, notification_id: str) -> None:
        super().__init__(f"Notification {notification_id!r} not found")
        self.notification_id = notification_id


class StorageUnavailableError(NotificationError):
    """The backing store could not complete the operation."""


class RegistrationRejectedError(NotificationError):
    """A connection claimed an address it is not allowed to use."""


__all__ = [
    "InvalidRequest",
    "NotFoundError",
    "NotificationError",
    "RegistrationRejectedError",
    "StorageUnavailableError",
    "ValidationError",
]
