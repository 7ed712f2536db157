"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from notification_service.domain.entities import Notification
from notification_service.utils import to_app_timezone


class NotificationCreate(BaseModel):
    """Body of ``POST /api/send-notification``.

    Fields are optional here so that a missing one is reported by the use case
    as a client error instead of a schema error.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    message: str | None = None
    user_id: str | None = Field(default=None, alias="userId")


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    message: str
    user_id: str = Field(alias="userId")
    read: bool
    created_at: datetime = Field(alias="createdAt")

    @field_serializer("created_at")
    def _serialize_created_at(self, value: datetime) -> str:
        return to_app_timezone(value).isoformat()

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationRead":
        return cls(
            id=notification.id or "",
            title=notification.title,
            message=notification.message,
            user_id=notification.user_id,
            read=notification.read,
            created_at=notification.created_at,
        )


class NotificationSendResponse(BaseModel):
    """Envelope returned after a notification is created or acknowledged."""

    success: bool = True
    notification: NotificationRead


class NotificationDeleteResponse(BaseModel):
    """Confirmation returned after a notification is deleted."""

    success: bool = True
    message: str = "Notification deleted successfully"


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str


__all__ = [
    "ErrorResponse",
    "NotificationCreate",
    "NotificationDeleteResponse",
    "NotificationRead",
    "NotificationSendResponse",
]
