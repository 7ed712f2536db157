"""Helpers shared by the test modules."""

from __future__ import annotations

import time
from typing import Callable


class FakeConnection:
    """Stand-in for a websocket that records what it was sent."""

    def __init__(self, name: str = "connection") -> None:
        self.name = name
        self.sent: list[dict] = []

    async def send_json(self, message: dict) -> None:
        self.sent.append(message)


class BrokenConnection(FakeConnection):
    """Connection whose every push fails."""

    async def send_json(self, message: dict) -> None:
        raise RuntimeError("connection closed")


def wait_until(predicate: Callable[[], bool], *, timeout: float = 2.0) -> bool:
    """Poll ``predicate`` until it holds or ``timeout`` seconds pass."""

    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.02)
    return predicate()
