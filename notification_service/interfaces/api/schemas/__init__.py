from .notification import (
    ErrorResponse,
    NotificationCreate,
    NotificationDeleteResponse,
    NotificationRead,
    NotificationSendResponse,
)

__all__ = [
    "ErrorResponse",
    "NotificationCreate",
    "NotificationDeleteResponse",
    "NotificationRead",
    "NotificationSendResponse",
]
