"""Persist a notification and push it to the connections of its recipient."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from notification_service.domain.entities import Notification
from notification_service.infrastructure.notifications import (
    NotificationPublisher,
    notification_publisher,
)

from .create_notification import create_notification

logger = logging.getLogger(__name__)


def route_notification(
    session: Session,
    *,
    title: str,
    message: str,
    user_id: str,
    publisher: NotificationPublisher | None = None,
) -> Notification:
    """Store the notification, then broadcast it to ``user_id``'s group.

    Failures while storing propagate unchanged and nothing is broadcast. Once
    stored the call succeeds whether or not anyone is connected; offline
    recipients read it later through :func:`list_notifications`.
    """

    saved = create_notification(session, title=title, message=message, user_id=user_id)
    (publisher or notification_publisher).dispatch(saved)
    logger.info("Notification sent: %s", saved.title)
    return saved
