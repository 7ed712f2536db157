"""Utility script to send a notification from the command line."""

from __future__ import annotations

import argparse
import json

import httpx

from notification_service.application.use_cases.notifications import create_notification
from notification_service.domain.exceptions import StorageUnavailableError, ValidationError
from notification_service.infrastructure.database import SessionLocal, initialize_database
from notification_service.infrastructure.notifications import serialize_notification


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the notification."""

    parser = argparse.ArgumentParser(
        description="Send a notification to a user address.",
    )
    parser.add_argument("--user-id", required=True, help="Address of the recipient")
    parser.add_argument("--title", required=True, help="Notification title")
    parser.add_argument("--message", required=True, help="Notification body")
    parser.add_argument(
        "--server",
        default=None,
        help=(
            "Base URL of a running server (e.g. http://localhost:3002). When given the "
            "notification goes through its API so connected clients receive it; "
            "otherwise it is only stored in the configured database."
        ),
    )
    return parser.parse_args()


def _send_through_server(args: argparse.Namespace) -> dict:
    response = httpx.post(
        f"{args.server.rstrip('/')}/api/send-notification",
        json={"title": args.title, "message": args.message, "userId": args.user_id},
        timeout=10.0,
    )
    if response.status_code != 200:
        raise SystemExit(
            f"The server rejected the notification ({response.status_code}): {response.text}"
        )
    return response.json()["notification"]


def _store_directly(args: argparse.Namespace) -> dict:
    initialize_database()

    with SessionLocal() as session:
        try:
            notification = create_notification(
                session, title=args.title, message=args.message, user_id=args.user_id
            )
        except ValidationError as exc:
            raise SystemExit(f"Invalid notification: {', '.join(exc.fields)} missing") from exc
        except StorageUnavailableError as exc:
            raise SystemExit(f"Could not store the notification: {exc.__cause__}") from exc
    return serialize_notification(notification)


def main() -> None:
    """Send a notification using the provided command line arguments."""

    args = parse_args()
    if args.server:
        try:
            payload = _send_through_server(args)
        except httpx.HTTPError as exc:
            raise SystemExit(f"Could not reach {args.server}: {exc}") from exc
    else:
        payload = _store_directly(args)
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
