"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Notification:
    """Message addressed to a user and stored until it is deleted."""

    id: str | None
    title: str
    message: str
    user_id: str
    read: bool = False
    created_at: datetime | None = None


__all__ = ["Notification"]
