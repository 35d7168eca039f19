"""WebSocket message loop and dispatch for the session channel (/ws)."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Literal
from collections.abc import Callable, Awaitable

from fastapi import WebSocket, WebSocketDisconnect

from session_watchdog.state import EnvelopeState, WatchdogState
from session_watchdog.config.websocket import (
    WS_MSG_END,
    WS_MSG_PING,
    WS_EVT_PONG,
    WS_MSG_EXTEND,
    WS_MSG_LOGOUT,
    WS_EVT_EXTENDED,
    WS_MSG_ACTIVITY,
    WS_EVT_SESSION_END,
    WS_ERROR_INVALID_MESSAGE,
    WS_ERROR_INVALID_PAYLOAD,
    WS_ERROR_SESSION_EXPIRED,
    WS_CLOSE_CLIENT_REQUEST_CODE,
)

from .lifecycle import SessionLifecycle
from .parser import parse_activity_event, parse_client_message

logger = logging.getLogger(__name__)

HandlerFn = Callable[[WebSocket, SessionLifecycle, EnvelopeState, dict[str, Any]], Awaitable[None]]


async def _recv_text_with_timeout(
    ws: WebSocket,
    lifecycle: SessionLifecycle,
    timeout_s: float,
) -> tuple[str | None, bool]:
    try:
        message = await asyncio.wait_for(ws.receive_text(), timeout=timeout_s)
        return message, False
    except TimeoutError:
        return None, lifecycle.should_close()


def _parse_or_enqueue_error(raw: str, lifecycle: SessionLifecycle) -> dict[str, Any] | None:
    try:
        return parse_client_message(raw)
    except ValueError as exc:
        lifecycle.enqueue_error(
            WS_ERROR_INVALID_MESSAGE,
            str(exc),
            reason_code="invalid_message",
        )
        return None


async def _handle_activity(
    _ws: WebSocket,
    lifecycle: SessionLifecycle,
    state: EnvelopeState,
    payload: dict[str, Any],
) -> None:
    try:
        event = parse_activity_event(payload)
    except ValueError as exc:
        lifecycle.enqueue_error(
            WS_ERROR_INVALID_PAYLOAD,
            str(exc),
            reason_code="missing_event",
        )
        return
    if not lifecycle.hub.emit(event):
        logger.debug("session %s: ignoring non-activity event %r", state.session_id, event)


async def _handle_extend(
    _ws: WebSocket,
    lifecycle: SessionLifecycle,
    _state: EnvelopeState,
    _payload: dict[str, Any],
) -> None:
    handle = lifecycle.handle
    handle.extend()
    if handle.current_state() is WatchdogState.EXPIRED:
        lifecycle.enqueue_error(
            WS_ERROR_SESSION_EXPIRED,
            "session already expired; sign in again",
            reason_code="extend_after_expiry",
        )
        return
    lifecycle.enqueue(WS_EVT_EXTENDED, {"seconds_remaining": handle.seconds_remaining()})


async def _handle_logout(
    _ws: WebSocket,
    lifecycle: SessionLifecycle,
    state: EnvelopeState,
    _payload: dict[str, Any],
) -> None:
    logger.info("session %s: logout requested", state.session_id)
    lifecycle.handle.force_expire()


async def _handle_ping(
    _ws: WebSocket,
    lifecycle: SessionLifecycle,
    _state: EnvelopeState,
    _payload: dict[str, Any],
) -> None:
    lifecycle.enqueue(WS_EVT_PONG, {})


HANDLERS: dict[str, HandlerFn] = {
    WS_MSG_ACTIVITY: _handle_activity,
    WS_MSG_EXTEND: _handle_extend,
    WS_MSG_LOGOUT: _handle_logout,
    WS_MSG_PING: _handle_ping,
}


async def _handle_control_message(
    lifecycle: SessionLifecycle,
    msg_type: str,
) -> Literal["none", "close"]:
    if msg_type == WS_MSG_END:
        await lifecycle.finish(WS_EVT_SESSION_END, {}, close_code=WS_CLOSE_CLIENT_REQUEST_CODE)
        return "close"
    return "none"


async def run_message_loop(
    ws: WebSocket,
    lifecycle: SessionLifecycle,
    state: EnvelopeState,
    *,
    receive_timeout_s: float,
) -> None:
    try:
        while not lifecycle.should_close():
            raw, should_exit = await _recv_text_with_timeout(ws, lifecycle, receive_timeout_s)
            if should_exit:
                return
            if raw is None:
                continue

            state.messages_received += 1
            msg = _parse_or_enqueue_error(raw, lifecycle)
            if msg is None:
                continue

            msg_type = msg["type"]
            payload = msg["payload"] or {}
            if msg["session_id"] != state.session_id:
                lifecycle.enqueue_error(
                    WS_ERROR_INVALID_PAYLOAD,
                    "session_id does not match this connection",
                    reason_code="session_id_mismatch",
                    details={"expected": state.session_id, "received": msg["session_id"]},
                )
                continue

            if await _handle_control_message(lifecycle, msg_type) == "close":
                return

            handler = HANDLERS.get(msg_type)
            if handler is not None:
                await handler(ws, lifecycle, state, payload)
                continue

            lifecycle.enqueue_error(
                WS_ERROR_INVALID_MESSAGE,
                f"message type '{msg_type}' is not supported",
                reason_code="unknown_message_type",
            )
    except WebSocketDisconnect:
        return


__all__ = ["run_message_loop"]
