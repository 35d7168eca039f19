"""Per-connection envelope state."""

from __future__ import annotations

from dataclasses import dataclass

from session_watchdog.config.websocket import WS_UNKNOWN_SESSION_ID


@dataclass(slots=True)
class EnvelopeState:
    session_id: str = WS_UNKNOWN_SESSION_ID
    messages_received: int = 0


__all__ = ["EnvelopeState"]
