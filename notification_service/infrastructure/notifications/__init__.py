"""Realtime notification helpers for the infrastructure layer."""

from .manager import NotificationConnectionManager, notification_manager
from .publisher import (
    NotificationPublisher,
    notification_publisher,
    serialize_notification,
)
from .verification import AddressVerifier, AllowAnyAddress

__all__ = [
    "AddressVerifier",
    "AllowAnyAddress",
    "NotificationConnectionManager",
    "notification_manager",
    "NotificationPublisher",
    "notification_publisher",
    "serialize_notification",
]
