"""HTTP endpoints to send, list, acknowledge and delete notifications."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from notification_service.application.use_cases.notifications import (
    delete_notification as delete_notification_uc,
    list_notifications as list_notifications_uc,
    mark_notification_read as mark_notification_read_uc,
    route_notification as route_notification_uc,
)
from notification_service.domain.exceptions import (
    NotFoundError,
    StorageUnavailableError,
    ValidationError,
)
from notification_service.infrastructure.database import get_db
from notification_service.infrastructure.notifications import NotificationPublisher
from notification_service.interfaces.api.dependencies import get_notification_publisher
from notification_service.interfaces.api.schemas import (
    ErrorResponse,
    NotificationCreate,
    NotificationDeleteResponse,
    NotificationRead,
    NotificationSendResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["notifications"])

_NOT_FOUND = "Notification not found"


@router.get(
    "/notifications",
    response_model=list[NotificationRead],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def list_notifications(
    user_id: str | None = Query(default=None, alias="userId"),
    db: Session = Depends(get_db),
) -> list[NotificationRead]:
    """Return the notifications stored for ``userId``, newest first."""

    try:
        notifications = list_notifications_uc(db, user_id)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing userId") from exc
    except StorageUnavailableError as exc:
        logger.exception("Error fetching notifications for %s", user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch notifications",
        ) from exc
    return [NotificationRead.from_entity(notification) for notification in notifications]


@router.post(
    "/send-notification",
    response_model=NotificationSendResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def send_notification(
    notification_in: NotificationCreate,
    db: Session = Depends(get_db),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
) -> NotificationSendResponse:
    """Store a notification and push it to every connection of its recipient."""

    try:
        notification = route_notification_uc(
            db,
            title=notification_in.title,
            message=notification_in.message,
            user_id=notification_in.user_id,
            publisher=publisher,
        )
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required fields"
        ) from exc
    except StorageUnavailableError as exc:
        logger.exception("Error sending notification")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send notification",
        ) from exc
    return NotificationSendResponse(notification=NotificationRead.from_entity(notification))


@router.delete(
    "/notifications/{notification_id}",
    response_model=NotificationDeleteResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def delete_notification(
    notification_id: str,
    db: Session = Depends(get_db),
) -> NotificationDeleteResponse:
    """Permanently delete a notification."""

    try:
        delete_notification_uc(db, notification_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND) from exc
    except StorageUnavailableError as exc:
        logger.exception("Error deleting notification %s", notification_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete notification",
        ) from exc
    logger.info("Notification deleted: %s", notification_id)
    return NotificationDeleteResponse()


@router.put(
    "/notifications/{notification_id}/read",
    response_model=NotificationSendResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def mark_notification_read(
    notification_id: str,
    db: Session = Depends(get_db),
) -> NotificationSendResponse:
    """Flag a notification as read and return the updated record."""

    try:
        notification = mark_notification_read_uc(db, notification_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND) from exc
    except StorageUnavailableError as exc:
        logger.exception("Error marking notification %s as read", notification_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to mark notification as read",
        ) from exc
    logger.info("Notification marked as read: %s", notification_id)
    return NotificationSendResponse(notification=NotificationRead.from_entity(notification))
