"""Websocket channel that registers addresses and relays notification events.

Frames are JSON objects ``{"type": <event>, "data": <payload>}``. The channel
never answers with an error frame: failures are logged and dropped.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

from anyio import to_thread
from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from sqlalchemy.orm import Session, sessionmaker

from notification_service.application.use_cases.notifications import (
    mark_notification_read as mark_notification_read_uc,
    route_notification as route_notification_uc,
)
from notification_service.config import get_settings
from notification_service.domain.entities import Notification
from notification_service.domain.exceptions import (
    RegistrationRejectedError,
    ValidationError,
)
from notification_service.infrastructure.notifications import (
    NotificationConnectionManager,
    NotificationPublisher,
)
from notification_service.interfaces.api.dependencies import (
    get_connection_manager,
    get_notification_publisher,
    get_session_factory,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["channel"])

_background_tasks: set[asyncio.Task[None]] = set()


@router.websocket(get_settings().channel_path)
async def notification_channel(
    websocket: WebSocket,
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
    manager: NotificationConnectionManager = Depends(get_connection_manager),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
) -> None:
    """Serve one client connection until it closes."""

    await websocket.accept()
    logger.info("New client connected")
    try:
        while True:
            try:
                frame = await websocket.receive_json()
            except (ValueError, KeyError):
                logger.warning("Ignoring a frame that is not a JSON text message")
                continue

            if not isinstance(frame, dict):
                logger.warning("Ignoring a frame that is not a JSON object")
                continue

            event = frame.get("type")
            data = frame.get("data")

            if event == "ping":
                await websocket.send_json({"type": "pong"})
            elif event == "register":
                _register(manager, websocket, data)
            elif event == "send-notification":
                _spawn(_send_notification(session_factory, publisher, data))
            elif event == "mark-read":
                _spawn(_mark_read(session_factory, data))
            else:
                logger.warning("Ignoring unknown channel event %r", event)
    except WebSocketDisconnect:
        pass
    finally:
        manager.unregister(websocket)
        logger.info("Client disconnected")


def _register(
    manager: NotificationConnectionManager, websocket: WebSocket, data: Any
) -> None:
    credential = None
    if isinstance(data, dict):
        credential = data.get("credential")
        data = data.get("userId")

    try:
        manager.register(websocket, data, credential=credential)
    except ValidationError:
        logger.warning("Rejected register event without a userId")
        return
    except RegistrationRejectedError as exc:
        logger.warning("Rejected register event: %s", exc)
        return
    logger.info("Registered userId: %s", data)


def _spawn(coroutine: Coroutine[Any, Any, None]) -> None:
    task = asyncio.ensure_future(coroutine)
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)


async def _send_notification(
    session_factory: sessionmaker[Session],
    publisher: NotificationPublisher,
    data: Any,
) -> None:
    if not isinstance(data, dict):
        logger.error("Error sending notification: payload must be an object")
        return

    def route() -> Notification:
        with session_factory() as session:
            return route_notification_uc(
                session,
                title=data.get("title"),
                message=data.get("message"),
                user_id=data.get("userId"),
                publisher=publisher,
            )

    try:
        await to_thread.run_sync(route)
    except Exception:
        logger.exception("Error sending notification")


async def _mark_read(session_factory: sessionmaker[Session], notification_id: Any) -> None:
    if not isinstance(notification_id, str) or not notification_id:
        logger.error("Error marking notification as read: missing notificationId")
        return

    def mark() -> Notification:
        with session_factory() as session:
            return mark_notification_read_uc(session, notification_id)

    try:
        await to_thread.run_sync(mark)
    except Exception:
        logger.exception("Error marking notification as read: %s", notification_id)
        return
    logger.info("Notification marked as read: %s", notification_id)
