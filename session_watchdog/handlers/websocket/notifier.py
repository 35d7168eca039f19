"""Watchdog notifier that turns state changes into outbound envelopes."""

from __future__ import annotations

import asyncio
from typing import Any

from session_watchdog.state import EnvelopeState
from session_watchdog.watchdog import countdown_urgency
from session_watchdog.config.websocket import (
    WS_EVT_TICK,
    WS_EVT_EXPIRED,
    WS_EVT_RESUMED,
    WS_EVT_WARNING,
    WS_CLOSE_EXPIRED_CODE,
    WS_CLOSE_EXPIRED_REASON,
)

from .errors import build_envelope

# (envelope, close code, close reason); a close code ends the connection after sending.
Outbound = tuple[dict[str, Any], int | None, str | None]


class QueueNotifier:
    """Enqueues envelopes; never touches the socket from inside a tick."""

    def __init__(self, queue: asyncio.Queue[Outbound], state: EnvelopeState) -> None:
        self._queue = queue
        self._state = state

    def on_warn(self, seconds_remaining: int) -> None:
        self._put(WS_EVT_WARNING, self._countdown(seconds_remaining))

    def on_tick(self, seconds_remaining: int) -> None:
        self._put(WS_EVT_TICK, self._countdown(seconds_remaining))

    def on_resume(self) -> None:
        self._put(WS_EVT_RESUMED, {})

    def on_expire(self) -> None:
        self._put(
            WS_EVT_EXPIRED,
            {"reason": WS_CLOSE_EXPIRED_REASON},
            close_code=WS_CLOSE_EXPIRED_CODE,
            close_reason=WS_CLOSE_EXPIRED_REASON,
        )

    @staticmethod
    def _countdown(seconds_remaining: int) -> dict[str, Any]:
        return {
            "seconds_remaining": seconds_remaining,
            "urgency": countdown_urgency(seconds_remaining).value,
        }

    def _put(
        self,
        msg_type: str,
        payload: dict[str, Any],
        *,
        close_code: int | None = None,
        close_reason: str | None = None,
    ) -> None:
        envelope = build_envelope(msg_type, self._state.session_id, payload)
        self._queue.put_nowait((envelope, close_code, close_reason))


__all__ = ["Outbound", "QueueNotifier"]
