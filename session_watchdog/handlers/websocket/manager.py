"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import uuid
import logging
import contextlib

from fastapi import WebSocket

from session_watchdog.state import RuntimeDeps, EnvelopeState
from session_watchdog.config.websocket import WS_CLOSE_BUSY_CODE, WS_ERROR_SERVER_AT_CAPACITY

from .errors import reject_connection
from .lifecycle import SessionLifecycle
from .message_loop import run_message_loop

logger = logging.getLogger(__name__)


def _resolve_session_id(ws: WebSocket) -> str:
    # Pages may resume a known id; otherwise the server assigns one.
    requested = (ws.query_params.get("session_id") or "").strip()
    return requested or uuid.uuid4().hex


async def _prepare_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> bool:
    if not await runtime_deps.connections.connect(ws):
        await reject_connection(
            ws,
            error_code=WS_ERROR_SERVER_AT_CAPACITY,
            message="Server cannot accept new connections. Please try again later.",
            close_code=WS_CLOSE_BUSY_CODE,
        )
        return False

    try:
        await ws.accept()
    except Exception:
        with contextlib.suppress(Exception):
            await runtime_deps.connections.disconnect(ws)
        raise
    return True


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    lifecycle: SessionLifecycle | None = None
    admitted = False
    state = EnvelopeState(session_id=_resolve_session_id(ws))
    try:
        if not await _prepare_connection(ws, runtime_deps):
            return
        admitted = True

        lifecycle = SessionLifecycle(ws, runtime_deps.settings.watchdog, state)
        runtime_deps.connections.attach(ws, lifecycle.start())

        logger.info(
            "WebSocket session %s accepted. Active: %s",
            state.session_id,
            runtime_deps.connections.get_connection_count(),
        )
        await run_message_loop(
            ws,
            lifecycle,
            state,
            receive_timeout_s=runtime_deps.settings.websocket.receive_timeout_s,
        )
    finally:
        if lifecycle is not None:
            with contextlib.suppress(Exception):
                await lifecycle.stop()

        if admitted:
            with contextlib.suppress(Exception):
                await runtime_deps.connections.disconnect(ws)
            logger.info(
                "WebSocket session %s closed after %s message(s). Active: %s",
                state.session_id,
                state.messages_received,
                runtime_deps.connections.get_connection_count(),
            )


__all__ = ["handle_websocket_connection"]
