"""Connection management helpers for notification websockets."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, DefaultDict, Set

from fastapi import WebSocket

from notification_service.domain.exceptions import (
    RegistrationRejectedError,
    ValidationError,
)
from notification_service.domain.validation import is_present

from .verification import AddressVerifier, AllowAnyAddress

logger = logging.getLogger(__name__)


class NotificationConnectionManager:
    """Track which live connections are registered under which user address.

    A connection belongs to at most one address group at a time; registering it
    again moves it to the new group.
    """

    def __init__(self, verifier: AddressVerifier | None = None) -> None:
        self._verifier: AddressVerifier = verifier or AllowAnyAddress()
        self._connections: DefaultDict[str, Set[WebSocket]] = defaultdict(set)
        self._addresses: dict[WebSocket, str] = {}

    def register(
        self, websocket: WebSocket, user_id: str, *, credential: str | None = None
    ) -> None:
        """Bind ``websocket`` to ``user_id``, replacing any previous binding."""

        if not is_present(user_id):
            raise ValidationError("Missing userId", fields=["userId"])
        if not self._verifier.verify(user_id, credential):
            raise RegistrationRejectedError(f"Address {user_id!r} was not verified")

        self.unregister(websocket)
        self._connections[user_id].add(websocket)
        self._addresses[websocket] = user_id

    def unregister(self, websocket: WebSocket) -> None:
        """Remove ``websocket`` from its address group, if it has one."""

        user_id = self._addresses.pop(websocket, None)
        if user_id is None:
            return
        connections = self._connections.get(user_id)
        if connections is None:
            return
        connections.discard(websocket)
        if not connections:
            self._connections.pop(user_id, None)

    def address_of(self, websocket: WebSocket) -> str | None:
        return self._addresses.get(websocket)

    def members(self, user_id: str) -> set[WebSocket]:
        return set(self._connections.get(user_id, set()))

    async def send_to_user(self, user_id: str, message: dict[str, Any]) -> None:
        """Send ``message`` once to every connection registered for ``user_id``."""

        for connection in self.members(user_id):
            try:
                await connection.send_json(message)
            except Exception:
                logger.exception("Push to a connection of %s failed; dropping it", user_id)
                self.unregister(connection)


notification_manager = NotificationConnectionManager()


__all__ = ["NotificationConnectionManager", "notification_manager"]
