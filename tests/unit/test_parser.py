from __future__ import annotations

import json

import pytest

from session_watchdog.handlers.websocket.parser import parse_activity_event, parse_client_message


def test_parse_client_message_ok() -> None:
    raw = json.dumps({
        "type": " activity ",
        "session_id": "s1",
        "payload": {"event": "keydown"},
    })
    msg = parse_client_message(raw)
    assert msg["type"] == "activity"
    assert msg["session_id"] == "s1"
    assert msg["payload"]["event"] == "keydown"


def test_parse_client_message_null_payload() -> None:
    msg = parse_client_message(json.dumps({"type": "ping", "session_id": "s", "payload": None}))
    assert msg["payload"] == {}


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        json.dumps([]),
        json.dumps({"session_id": "s", "payload": {}}),
        json.dumps({"type": "ping", "payload": {}}),
        json.dumps({"type": " ", "session_id": "s"}),
        json.dumps({"type": "ping", "session_id": "s", "payload": []}),
    ],
)
def test_parse_client_message_invalid(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_client_message(raw)


def test_parse_activity_event_normalizes() -> None:
    assert parse_activity_event({"event": " MouseMove "}) == "mousemove"


@pytest.mark.parametrize("payload", [{}, {"event": ""}, {"event": 3}])
def test_parse_activity_event_invalid(payload: dict) -> None:
    with pytest.raises(ValueError):
        parse_activity_event(payload)
