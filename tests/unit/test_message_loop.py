from __future__ import annotations

import asyncio
import json

import orjson
import pytest

from session_watchdog import WatchdogConfig
from session_watchdog.state import EnvelopeState, WatchdogSettings
from session_watchdog.handlers.websocket.lifecycle import SessionLifecycle
from session_watchdog.handlers.websocket.message_loop import run_message_loop


class _FakeWebSocket:
    def __init__(self, incoming: list[str]) -> None:
        self._incoming = list(incoming)
        self.sent: list[dict] = []
        self.writers: set[asyncio.Task | None] = set()
        self.close_code: int | None = None

    async def receive_text(self) -> str:
        if not self._incoming:
            await asyncio.sleep(3600)
        return self._incoming.pop(0)

    async def send_text(self, text: str) -> None:
        self.writers.add(asyncio.current_task())
        self.sent.append(orjson.loads(text))

    async def close(self, *, code: int = 1000, reason: str | None = None) -> None:
        self.close_code = code


def _msg(msg_type: str, session_id: str = "page-1", **payload) -> str:
    return json.dumps({"type": msg_type, "session_id": session_id, "payload": payload})


@pytest.mark.asyncio
async def test_errors_are_written_by_the_session_writer_in_order() -> None:
    ws = _FakeWebSocket(
        [
            _msg("ping"),
            "not json",
            _msg("ping", session_id="other-page"),
            _msg("dance"),
            _msg("end"),
        ]
    )
    state = EnvelopeState(session_id="page-1")
    settings = WatchdogSettings(WatchdogConfig(300, 30), tick_period_s=1.0, activity_debounce_s=1.0)
    lifecycle = SessionLifecycle(ws, settings, state)
    lifecycle.start()

    await asyncio.wait_for(run_message_loop(ws, lifecycle, state, receive_timeout_s=0.05), timeout=2.0)
    await lifecycle.stop()

    assert [m["type"] for m in ws.sent] == [
        "session.started",
        "pong",
        "error",
        "error",
        "error",
        "session_end",
    ]
    reasons = [m["payload"]["details"]["reason_code"] for m in ws.sent if m["type"] == "error"]
    assert reasons == ["invalid_message", "session_id_mismatch", "unknown_message_type"]
    assert ws.close_code == 1000
    assert len(ws.writers) == 1
    assert asyncio.current_task() not in ws.writers
