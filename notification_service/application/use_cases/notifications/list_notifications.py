"""Use case for listing the notifications addressed to a user."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notification_service.domain.entities import Notification
from notification_service.domain.exceptions import InvalidRequest
from notification_service.domain.validation import is_present
from notification_service.infrastructure.repositories import NotificationRepository


def list_notifications(session: Session, user_id: str | None) -> Sequence[Notification]:
    """Return the notifications of ``user_id``, newest first."""

    if not is_present(user_id):
        raise InvalidRequest("Missing userId", fields=["userId"])
    return NotificationRepository(session).list_for_user(user_id)
