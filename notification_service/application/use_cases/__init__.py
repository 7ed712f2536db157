"""Aggregate application use cases."""

from .notifications import (
    create_notification,
    delete_notification,
    list_notifications,
    mark_notification_read,
    route_notification,
)

__all__ = [
    "create_notification",
    "delete_notification",
    "list_notifications",
    "mark_notification_read",
    "route_notification",
]
