"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from notification_service.infrastructure.database import Base


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), nullable=False, unique=True, index=True)
    title = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    user_id = Column(String(255), nullable=False, index=True)
    read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(), nullable=False)


__all__ = ["NotificationModel"]
