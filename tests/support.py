"""
Shared helpers for meetup tests.

Builds request payloads relative to a frozen clock and signs bearer
tokens with the test secret.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from meetup_api.app.core.security import create_access_token

NOW = datetime(2030, 1, 15, 12, 0, tzinfo=timezone.utc)
SECRET = "test-secret"
LONG_DESCRIPTION = "A long enough description for a meetup about Python web services."


def run(coro):
    """Drive a service coroutine to completion."""
    return asyncio.run(coro)


def frozen_now() -> datetime:
    return NOW


def meetup_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "title": "Meetup",
        "description": LONG_DESCRIPTION,
        "locate": "Room A",
        "banner": "img.png",
        "date": (NOW + timedelta(days=1)).isoformat(),
    }
    payload.update(overrides)
    return payload


def auth_headers(user_id: int, secret: str = SECRET) -> Dict[str, str]:
    token = create_access_token({"user_id": user_id}, secret_key=secret)
    return {"Authorization": f"Bearer {token}"}
