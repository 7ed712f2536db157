from fastapi import FastAPI

from .channel import router as channel_router
from .notifications import router as notifications_router


def register_routes(app: FastAPI) -> None:
    """Register the HTTP API and the websocket channel on ``app``."""

    app.include_router(notifications_router)
    app.include_router(channel_router)
