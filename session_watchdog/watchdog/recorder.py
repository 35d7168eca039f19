"""Activity recorder: coalesces raw input signals into idle-clock resets."""

from __future__ import annotations

import logging
from collections.abc import Callable

from session_watchdog.state.watchdog import WatchdogState, WatchdogStatus

from .supervisor import TimeoutSupervisor

logger = logging.getLogger(__name__)


class ActivityRecorder:
    """Debounce activity bursts (pointer moves, key repeats, scrolling).

    Signals closer together than ``debounce_s`` leave the timestamp alone,
    except while the warning is showing: the first signal after a warning
    always clears it.
    """

    def __init__(
        self,
        status: WatchdogStatus,
        supervisor: TimeoutSupervisor,
        *,
        now_fn: Callable[[], float],
        debounce_s: float,
    ) -> None:
        self._status = status
        self._supervisor = supervisor
        self._now = now_fn
        self._debounce_s = max(0.0, float(debounce_s))

    def record_activity(self) -> None:
        status = self._status
        if not status.live:
            return
        now = self._now()
        if status.state is not WatchdogState.WARNING and (now - status.last_activity) < self._debounce_s:
            return
        self._supervisor.touch(now)


__all__ = ["ActivityRecorder"]
