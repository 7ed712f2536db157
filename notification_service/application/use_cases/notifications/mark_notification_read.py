"""Use case for acknowledging a notification."""

from sqlalchemy.orm import Session

from notification_service.domain.entities import Notification
from notification_service.infrastructure.repositories import NotificationRepository


def mark_notification_read(session: Session, notification_id: str) -> Notification:
    """Flag the notification as read; repeating the call changes nothing."""

    return NotificationRepository(session).mark_as_read(notification_id)
