"""FastAPI dependency utilities."""

from sqlalchemy.orm import Session, sessionmaker

from notification_service.infrastructure.database import SessionLocal
from notification_service.infrastructure.notifications import (
    NotificationConnectionManager,
    NotificationPublisher,
    notification_manager,
    notification_publisher,
)


def get_session_factory() -> sessionmaker[Session]:
    """Return the factory used to open sessions outside request scope."""

    return SessionLocal


def get_connection_manager() -> NotificationConnectionManager:
    """Return the registry of live channel connections."""

    return notification_manager


def get_notification_publisher() -> NotificationPublisher:
    """Return the publisher that pushes notifications to live connections."""

    return notification_publisher
