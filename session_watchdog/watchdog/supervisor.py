"""Timeout supervisor: the periodic tick and the state machine it drives."""

from __future__ import annotations

import logging
from collections.abc import Callable

from session_watchdog.state.watchdog import WatchdogState, WatchdogConfig, WatchdogStatus

from .notifier import Notifier
from .countdown import seconds_remaining
from .dispatch import ErrorHandler, dispatch
from .scheduler import CancelFn, ScheduleTickFn

logger = logging.getLogger(__name__)


class TimeoutSupervisor:
    """Compares idle time against the warning and expiry thresholds.

    State is always updated before the notifier is called, so a failing
    callback cannot leave the watchdog half-transitioned.
    """

    def __init__(
        self,
        config: WatchdogConfig,
        status: WatchdogStatus,
        notifier: Notifier,
        *,
        now_fn: Callable[[], float],
        error_handler: ErrorHandler | None = None,
    ) -> None:
        self._config = config
        self._status = status
        self._notifier = notifier
        self._now = now_fn
        self._error_handler = error_handler
        self._cancel_tick: CancelFn | None = None

    def elapsed(self) -> float:
        return max(0.0, self._now() - self._status.last_activity)

    def start(self, schedule_tick: ScheduleTickFn, period_s: float) -> None:
        if self._cancel_tick is not None or not self._status.live:
            return
        self._cancel_tick = schedule_tick(self.tick, period_s)

    def stop(self) -> None:
        cancel, self._cancel_tick = self._cancel_tick, None
        if cancel is not None:
            cancel()

    def tick(self) -> None:
        status = self._status
        if status.disposed:
            return
        if status.state is WatchdogState.EXPIRED:
            self.stop()
            return

        elapsed = self.elapsed()
        if elapsed >= self._config.total_budget_s:
            logger.info("watchdog: idle for %.1fs; session expired", elapsed)
            self._expire()
            return

        remaining = seconds_remaining(self._config.total_budget_s, elapsed)
        if status.state is WatchdogState.ACTIVE:
            if elapsed >= self._config.warn_after_s:
                status.state = WatchdogState.WARNING
                logger.info("watchdog: warning issued, %ss remaining", remaining)
                self._notify("on_warn", remaining)
            return

        self._notify("on_tick", remaining)

    def touch(self, now: float) -> bool:
        """Reset the idle clock to ``now``; returns True if a warning was cleared."""
        status = self._status
        if not status.live:
            return False
        if now - status.last_activity >= self._config.total_budget_s:
            # The deadline passed before a tick could observe it.
            logger.info("watchdog: activity arrived after the idle budget; session expired")
            self._expire()
            return False
        if now > status.last_activity:
            status.last_activity = now
        if status.state is not WatchdogState.WARNING:
            return False
        status.state = WatchdogState.ACTIVE
        logger.debug("watchdog: activity cleared the warning")
        self._notify("on_resume")
        return True

    def extend(self) -> None:
        self.touch(self._now())

    def force_expire(self) -> None:
        if not self._status.live:
            return
        logger.info("watchdog: expiry forced from %s", self._status.state.value)
        self._expire()

    def _expire(self) -> None:
        self._status.state = WatchdogState.EXPIRED
        self.stop()
        self._notify("on_expire")

    def _notify(self, event: str, *args: int) -> None:
        callback = getattr(self._notifier, event, None)
        if callback is None:
            logger.debug("notifier has no %s callback", event)
            return
        dispatch(callback, *args, event=event, error_handler=self._error_handler)


__all__ = ["TimeoutSupervisor"]
