"""Client message parsing/validation for the session envelope."""

from __future__ import annotations

from typing import Any

import orjson

from session_watchdog.config.websocket import WS_KEY_TYPE, WS_KEY_PAYLOAD, WS_KEY_SESSION_ID


def parse_client_message(raw: str) -> dict[str, Any]:
    try:
        msg = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise ValueError("message must be a JSON object")

    msg_type = msg.get(WS_KEY_TYPE)
    if not isinstance(msg_type, str) or not msg_type.strip():
        raise ValueError("message missing non-empty 'type'")

    session_id = msg.get(WS_KEY_SESSION_ID)
    if not isinstance(session_id, str) or not session_id.strip():
        raise ValueError("message missing non-empty 'session_id'")

    payload = msg.get(WS_KEY_PAYLOAD, {})
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValueError("message 'payload' must be an object")

    msg[WS_KEY_TYPE] = msg_type.strip()
    msg[WS_KEY_SESSION_ID] = session_id.strip()
    msg[WS_KEY_PAYLOAD] = payload
    return msg


def parse_activity_event(payload: dict[str, Any]) -> str:
    event = payload.get("event")
    if not isinstance(event, str) or not event.strip():
        raise ValueError("payload.event (input event name) is required")
    return event.strip().lower()


__all__ = ["parse_activity_event", "parse_client_message"]
