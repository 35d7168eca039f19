"""Per-connection session lifecycle: the watchdog plus the outbound writer."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any

from session_watchdog.state import EnvelopeState, WatchdogSettings
from session_watchdog.watchdog import WatchdogHandle, create_watchdog
from session_watchdog.handlers.activity_hub import ActivityEventHub
from session_watchdog.config.websocket import WS_EVT_ERROR, WS_EVT_STARTED

from .errors import build_envelope, build_error_payload, safe_send_envelope
from .notifier import Outbound, QueueNotifier

logger = logging.getLogger(__name__)

DRAIN_TIMEOUT_S = 2.0


class SessionLifecycle:
    """Owns one connection's watchdog and the single task that writes to it.

    Every outbound envelope goes through the queue, so the watchdog tick and
    the message loop never write to the socket concurrently.
    """

    def __init__(self, websocket: Any, settings: WatchdogSettings, state: EnvelopeState) -> None:
        self._ws = websocket
        self._settings = settings
        self._state = state
        self._queue: asyncio.Queue[Outbound] = asyncio.Queue()
        self._hub = ActivityEventHub()
        self._closed = asyncio.Event()
        self._handle: WatchdogHandle | None = None
        self._task: asyncio.Task | None = None

    @property
    def handle(self) -> WatchdogHandle:
        if self._handle is None:
            raise RuntimeError("session lifecycle has not been started")
        return self._handle

    @property
    def hub(self) -> ActivityEventHub:
        return self._hub

    def should_close(self) -> bool:
        return self._closed.is_set()

    def start(self) -> WatchdogHandle:
        if self._handle is not None:
            return self._handle
        config = self._settings.config
        self._handle = create_watchdog(
            config,
            QueueNotifier(self._queue, self._state),
            subscribe=self._hub.subscribe,
            tick_period_s=self._settings.tick_period_s,
            debounce_s=self._settings.activity_debounce_s,
        )
        self.enqueue(
            WS_EVT_STARTED,
            {"total_budget_s": config.total_budget_s, "warn_lead_s": config.warn_lead_s},
        )
        self._task = asyncio.create_task(self._sender_loop())
        return self._handle

    def enqueue(
        self,
        msg_type: str,
        payload: dict[str, Any] | None = None,
        *,
        close_code: int | None = None,
        close_reason: str | None = None,
    ) -> None:
        envelope = build_envelope(msg_type, self._state.session_id, payload)
        self._queue.put_nowait((envelope, close_code, close_reason))

    def enqueue_error(
        self,
        error_code: str,
        message: str,
        *,
        reason_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.enqueue(
            WS_EVT_ERROR,
            build_error_payload(error_code, message, details=details, reason_code=reason_code),
        )

    async def finish(self, msg_type: str, payload: dict[str, Any] | None, *, close_code: int) -> None:
        """Send a final envelope, close the socket and wait for the writer to exit."""
        self.enqueue(msg_type, payload, close_code=close_code)
        if self._task is None:
            return
        with contextlib.suppress(Exception):
            await asyncio.wait_for(asyncio.shield(self._task), timeout=DRAIN_TIMEOUT_S)

    async def stop(self) -> None:
        self._closed.set()
        if self._handle is not None:
            self._handle.dispose()
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(Exception):
            await self._task
        self._task = None

    async def _sender_loop(self) -> None:
        try:
            while True:
                envelope, close_code, close_reason = await self._queue.get()
                if not await safe_send_envelope(self._ws, envelope):
                    logger.debug("session %s: peer gone; stopping writer", self._state.session_id)
                    break
                if close_code is None:
                    continue
                logger.info("session %s: closing connection (%s)", self._state.session_id, close_code)
                with contextlib.suppress(Exception):
                    await self._ws.close(code=close_code, reason=close_reason or "")
                break
        except asyncio.CancelledError:
            return
        except Exception:
            logger.debug("session writer exiting due to unexpected error", exc_info=True)
        finally:
            self._closed.set()


__all__ = ["SessionLifecycle"]
