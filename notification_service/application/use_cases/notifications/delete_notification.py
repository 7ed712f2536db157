"""Use case for deleting notifications."""

from sqlalchemy.orm import Session

from notification_service.infrastructure.repositories import NotificationRepository


def delete_notification(session: Session, notification_id: str) -> None:
    """Permanently remove the specified notification."""

    NotificationRepository(session).delete(notification_id)
