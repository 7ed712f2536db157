from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from notification_service.config import get_settings
from notification_service.infrastructure.database import engine, initialize_database
from notification_service.interfaces.api.exception_handlers import (
    http_exception_handler,
    validation_exception_handler,
)
from notification_service.interfaces.api.routes import register_routes
from notification_service.logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the tables on startup and release the engine on shutdown."""

    configure_logging()
    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Build the FastAPI application serving the API and the channel."""

    settings = get_settings()
    app = FastAPI(title="Notification Service", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
