"""Persistence helpers for notification entities."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from typing import NoReturn

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from notification_service.domain.entities import Notification
from notification_service.domain.exceptions import NotFoundError, StorageUnavailableError
from notification_service.infrastructure.models import NotificationModel
from notification_service.utils import (
    from_storage,
    now_utc,
    to_storage,
)

logger = logging.getLogger(__name__)


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects.

    Every method is a single-record unit of work: it either commits or rolls
    back and raises :class:`StorageUnavailableError`.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: str) -> Sequence[Notification]:
        try:
            models = (
                self.session.query(NotificationModel)
                .filter(NotificationModel.user_id == user_id)
                .order_by(NotificationModel.created_at.desc(), NotificationModel.pk.desc())
                .all()
            )
        except SQLAlchemyError as exc:
            self._fail("list notifications", exc)
        return [self._to_entity(model) for model in models]

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            id=notification.id or str(uuid.uuid4()),
            title=notification.title,
            message=notification.message,
            user_id=notification.user_id,
            read=False,
            created_at=to_storage(notification.created_at or now_utc()),
        )
        try:
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        except SQLAlchemyError as exc:
            self._fail("create notification", exc)
        return self._to_entity(model)

    def mark_as_read(self, notification_id: str) -> Notification:
        try:
            self.session.query(NotificationModel).filter(
                NotificationModel.id == notification_id
            ).update({NotificationModel.read: True}, synchronize_session=False)
            self.session.commit()
            model = self._find(notification_id)
        except SQLAlchemyError as exc:
            self._fail("mark notification as read", exc)
        if model is None:
            raise NotFoundError(notification_id)
        return self._to_entity(model)

    def delete(self, notification_id: str) -> None:
        try:
            deleted = (
                self.session.query(NotificationModel)
                .filter(NotificationModel.id == notification_id)
                .delete(synchronize_session=False)
            )
            self.session.commit()
        except SQLAlchemyError as exc:
            self._fail("delete notification", exc)
        if not deleted:
            raise NotFoundError(notification_id)

    def _find(self, notification_id: str) -> NotificationModel | None:
        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.id == notification_id)
            .populate_existing()
            .first()
        )

    def _fail(self, action: str, exc: SQLAlchemyError) -> NoReturn:
        try:
            self.session.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback failed after trying to %s", action)
        raise StorageUnavailableError(f"Could not {action}") from exc

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            title=model.title,
            message=model.message,
            user_id=model.user_id,
            read=bool(model.read),
            created_at=from_storage(model.created_at),
        )


__all__ = ["NotificationRepository"]
