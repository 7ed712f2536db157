"""Utility helpers to push notifications to websocket subscribers."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from anyio import from_thread

from notification_service.domain.entities import Notification
from notification_service.utils import to_app_timezone

from .manager import NotificationConnectionManager, notification_manager

logger = logging.getLogger(__name__)


class NotificationPublisher:
    """Serialize notifications and schedule their delivery.

    Delivery is fire-and-forget: :meth:`dispatch` returns as soon as the push
    is scheduled on the event loop and never waits for the recipients.
    """

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager
        self._pending: set[asyncio.Task[None]] = set()

    def dispatch(self, notification: Notification) -> None:
        """Schedule ``notification`` to be delivered to its user's connections."""

        message = {"type": "notification", "data": self._serialize(notification)}
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run_sync(self._schedule, notification.user_id, message)
            except RuntimeError:
                # Called outside any event loop or worker thread: nobody can be connected.
                logger.debug(
                    "No event loop available; skipping push of notification %s",
                    notification.id,
                )
        else:
            self._schedule(notification.user_id, message)

    def _schedule(self, user_id: str, message: dict[str, Any]) -> None:
        task = asyncio.get_running_loop().create_task(
            self._deliver(user_id, message)
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _deliver(self, user_id: str, message: dict[str, Any]) -> None:
        try:
            await self._manager.send_to_user(user_id, message)
        except Exception:
            logger.exception("Broadcast to %s failed", user_id)

    @staticmethod
    def _serialize(notification: Notification) -> dict[str, Any]:
        return {
            "id": notification.id,
            "title": notification.title,
            "message": notification.message,
            "userId": notification.user_id,
            "read": notification.read,
            "createdAt": to_app_timezone(notification.created_at).isoformat()
            if notification.created_at
            else None,
        }


notification_publisher = NotificationPublisher(notification_manager)


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the JSON representation shared by pushes and API responses."""

    return NotificationPublisher._serialize(notification)


__all__ = [
    "NotificationPublisher",
    "notification_publisher",
    "serialize_notification",
]
