"""Shared fixtures: an isolated SQLite database and channel registry per test."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# The application engine is built at import time; keep it away from the working tree.
os.environ["DATABASE_URL"] = f"sqlite:///{Path(tempfile.mkdtemp()) / 'app.db'}"

from sqlalchemy.orm import sessionmaker  # noqa: E402

from notification_service.infrastructure.database import (  # noqa: E402
    build_engine,
    initialize_database,
)
from notification_service.config import reset_settings_cache  # noqa: E402
from notification_service.infrastructure.notifications import (  # noqa: E402
    NotificationConnectionManager,
    NotificationPublisher,
)
from notification_service.utils import get_app_timezone  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def app_timezone(monkeypatch):
    """Switch the application timezone for the duration of a test."""

    def apply(name: str) -> None:
        monkeypatch.setenv("APP_TIMEZONE", name)
        reset_settings_cache()
        get_app_timezone.cache_clear()

    yield apply
    reset_settings_cache()
    get_app_timezone.cache_clear()


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'notifications.db'}")
    initialize_database(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def broken_engine(tmp_path):
    """Engine whose database has no tables, so every statement fails."""

    engine = build_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def broken_session(broken_engine):
    db = sessionmaker(bind=broken_engine)()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def manager() -> NotificationConnectionManager:
    return NotificationConnectionManager()


@pytest.fixture
def publisher(manager) -> NotificationPublisher:
    return NotificationPublisher(manager)


@pytest.fixture
def app(session_factory, manager, publisher):
    from main import create_app
    from notification_service.infrastructure.database import get_db
    from notification_service.interfaces.api.dependencies import (
        get_connection_manager,
        get_notification_publisher,
        get_session_factory,
    )

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    application = create_app()
    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_session_factory] = lambda: session_factory
    application.dependency_overrides[get_connection_manager] = lambda: manager
    application.dependency_overrides[get_notification_publisher] = lambda: publisher
    return application


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient

    with TestClient(app) as test_client:
        yield test_client
