"""Fixed-rate tick scheduling on an asyncio event loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]
CancelFn = Callable[[], None]
ScheduleTickFn = Callable[[TickCallback, float], CancelFn]


class AsyncioTickScheduler:
    """Run ``callback`` every ``period_s`` seconds until cancelled.

    Deadlines sit on a fixed grid anchored at start, so a late tick does not
    push later ones back. Slots missed entirely (e.g. the loop was blocked)
    are skipped rather than replayed in a burst.
    """

    def __init__(
        self,
        callback: TickCallback,
        period_s: float,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        if period_s <= 0:
            raise ValueError("period_s must be greater than zero")
        self._callback = callback
        self._period_s = float(period_s)
        self._loop = loop or asyncio.get_running_loop()
        self._start = self._loop.time()
        self._ticks = 0
        self._handle: asyncio.TimerHandle | None = None
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def start(self) -> None:
        if self._handle is None and not self._cancelled:
            self._arm()

    def cancel(self) -> None:
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _arm(self) -> None:
        self._ticks += 1
        due = self._start + self._ticks * self._period_s
        now = self._loop.time()
        if due < now:
            self._ticks = int((now - self._start) // self._period_s) + 1
            due = self._start + self._ticks * self._period_s
        self._handle = self._loop.call_at(due, self._fire)

    def _fire(self) -> None:
        self._handle = None
        if self._cancelled:
            return
        try:
            self._callback()
        except Exception:
            logger.exception("tick callback failed")
        if not self._cancelled:
            self._arm()


def schedule_tick(callback: TickCallback, period_s: float) -> CancelFn:
    """Default ``schedule_tick`` collaborator bound to the running loop."""
    scheduler = AsyncioTickScheduler(callback, period_s)
    scheduler.start()
    return scheduler.cancel


__all__ = ["AsyncioTickScheduler", "CancelFn", "ScheduleTickFn", "TickCallback", "schedule_tick"]
