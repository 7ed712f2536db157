"""Notification store and delivery use cases."""

from .create_notification import create_notification
from .delete_notification import delete_notification
from .list_notifications import list_notifications
from .mark_notification_read import mark_notification_read
from .route_notification import route_notification

__all__ = [
    "create_notification",
    "delete_notification",
    "list_notifications",
    "mark_notification_read",
    "route_notification",
]
