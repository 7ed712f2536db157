"""Use case for storing a new notification."""

from __future__ import annotations

from sqlalchemy.orm import Session

from notification_service.domain.entities import Notification
from notification_service.domain.validation import require_fields
from notification_service.infrastructure.repositories import NotificationRepository
from notification_service.utils import now_utc


def create_notification(
    session: Session, *, title: str, message: str, user_id: str
) -> Notification:
    """Validate and persist a notification, returning the stored record."""

    require_fields(title=title, message=message, userId=user_id)
    notification = Notification(
        id=None,
        title=title,
        message=message,
        user_id=user_id,
        read=False,
        created_at=now_utc(),
    )
    return NotificationRepository(session).create(notification)
