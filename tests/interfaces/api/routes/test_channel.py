"""End-to-end tests for the websocket notification channel."""

from __future__ import annotations

import threading

from notification_service.interfaces.api.dependencies import get_session_factory
from tests.utils import wait_until


def _register(websocket, user_id) -> None:
    websocket.send_json({"type": "register", "data": user_id})
    websocket.send_json({"type": "ping"})
    assert websocket.receive_json() == {"type": "pong"}


def _send(client, user_id: str, title: str = "Order shipped") -> dict:
    response = client.post(
        "/api/send-notification",
        json={"title": title, "message": "Your order #42 has shipped", "userId": user_id},
    )
    assert response.status_code == 200
    return response.json()["notification"]


def test_api_notification_is_pushed_to_registered_connection(client) -> None:
    with client.websocket_connect("/ws") as websocket:
        _register(websocket, "alice")

        created = _send(client, "alice")

        assert websocket.receive_json() == {"type": "notification", "data": created}


def test_push_only_reaches_the_addressed_group(client) -> None:
    with client.websocket_connect("/ws") as first, client.websocket_connect("/ws") as second:
        _register(first, "u1")
        _register(second, "u2")

        for_u1 = _send(client, "u1")
        assert first.receive_json()["data"] == for_u1

        for_u2 = _send(client, "u2")
        assert second.receive_json()["data"] == for_u2


def test_reregistration_replaces_the_previous_address(client) -> None:
    with client.websocket_connect("/ws") as websocket:
        _register(websocket, "u1")
        _register(websocket, "u2")

        _send(client, "u1")
        for_u2 = _send(client, "u2")

        assert websocket.receive_json()["data"] == for_u2


def test_register_accepts_an_object_payload(client, manager) -> None:
    with client.websocket_connect("/ws") as websocket:
        _register(websocket, {"userId": "alice", "credential": None})

        assert len(manager.members("alice")) == 1


def test_send_notification_event_stores_and_pushes(client) -> None:
    with client.websocket_connect("/ws") as websocket:
        _register(websocket, "alice")

        websocket.send_json(
            {
                "type": "send-notification",
                "data": {"title": "Hi", "message": "From the channel", "userId": "alice"},
            }
        )
        pushed = websocket.receive_json()

    assert pushed["type"] == "notification"
    assert pushed["data"]["title"] == "Hi"
    assert pushed["data"]["read"] is False
    listed = client.get("/api/notifications", params={"userId": "alice"}).json()
    assert listed == [pushed["data"]]


def test_invalid_send_notification_event_is_dropped(client) -> None:
    with client.websocket_connect("/ws") as websocket:
        _register(websocket, "alice")
        websocket.send_json(
            {"type": "send-notification", "data": {"message": "no title", "userId": "alice"}}
        )
        websocket.send_json({"type": "unknown"})
        websocket.send_json(["not", "an", "object"])
        websocket.send_json({"type": "ping"})

        assert websocket.receive_json() == {"type": "pong"}

    assert client.get("/api/notifications", params={"userId": "alice"}).json() == []


def test_mark_read_event_updates_the_store(client) -> None:
    created = _send(client, "alice")

    with client.websocket_connect("/ws") as websocket:
        websocket.send_json({"type": "mark-read", "data": created["id"]})
        websocket.send_json({"type": "mark-read", "data": "missing"})

        def is_read() -> bool:
            listed = client.get("/api/notifications", params={"userId": "alice"}).json()
            return listed[0]["read"] is True

        assert wait_until(is_read)


def test_closing_the_connection_unregisters_it(client, manager) -> None:
    with client.websocket_connect("/ws") as websocket:
        _register(websocket, "alice")
        assert len(manager.members("alice")) == 1

    assert wait_until(lambda: not manager.members("alice"))


def test_slow_storage_does_not_hold_up_other_frames(app, client, session_factory) -> None:
    release = threading.Event()

    def gated_factory():
        release.wait(timeout=5)
        return session_factory()

    app.dependency_overrides[get_session_factory] = lambda: gated_factory

    with client.websocket_connect("/ws") as websocket:
        _register(websocket, "alice")
        websocket.send_json(
            {
                "type": "send-notification",
                "data": {"title": "Slow", "message": "Stored late", "userId": "alice"},
            }
        )
        websocket.send_json({"type": "ping"})

        assert websocket.receive_json() == {"type": "pong"}
        assert not release.is_set()

        release.set()
        pushed = websocket.receive_json()

    assert pushed["type"] == "notification"
    assert pushed["data"]["title"] == "Slow"
