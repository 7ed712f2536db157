"""Logging setup shared by the HTTP and channel entry points."""

from __future__ import annotations

import logging

from notification_service.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Attach a stream handler to the root logger once and apply ``level``."""

    global _configured

    resolved = (level or get_settings().log_level).upper()
    root = logging.getLogger()
    root.setLevel(resolved)
    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True


__all__ = ["configure_logging", "LOG_FORMAT"]
