"""Public watchdog handle and its factory."""

from __future__ import annotations

import time
import logging
from collections.abc import Callable, Iterable

from session_watchdog.config.watchdog import TICK_PERIOD_S, ACTIVITY_EVENTS, ACTIVITY_DEBOUNCE_S
from session_watchdog.state.watchdog import WatchdogState, WatchdogConfig, WatchdogStatus

from .notifier import Notifier
from .dispatch import ErrorHandler
from .recorder import ActivityRecorder
from .countdown import seconds_remaining
from .supervisor import TimeoutSupervisor
from .scheduler import ScheduleTickFn, schedule_tick as asyncio_schedule_tick

logger = logging.getLogger(__name__)

UnsubscribeFn = Callable[[], None]
SubscribeFn = Callable[[Iterable[str], Callable[[], None]], UnsubscribeFn]


class WatchdogHandle:
    """Commands and diagnostics for one watchdog instance.

    After :meth:`dispose` every command is a no-op.
    """

    def __init__(
        self,
        config: WatchdogConfig,
        status: WatchdogStatus,
        recorder: ActivityRecorder,
        supervisor: TimeoutSupervisor,
    ) -> None:
        self._config = config
        self._status = status
        self._recorder = recorder
        self._supervisor = supervisor
        self._unsubscribe: UnsubscribeFn | None = None

    @property
    def config(self) -> WatchdogConfig:
        return self._config

    @property
    def disposed(self) -> bool:
        return self._status.disposed

    def current_state(self) -> WatchdogState:
        return self._status.state

    def idle_seconds(self) -> float:
        return self._supervisor.elapsed()

    def seconds_remaining(self) -> int:
        if self._status.state is WatchdogState.EXPIRED:
            return 0
        return seconds_remaining(self._config.total_budget_s, self._supervisor.elapsed())

    def record_activity(self) -> None:
        if self._status.disposed:
            return
        self._recorder.record_activity()

    def extend(self) -> None:
        if self._status.disposed:
            return
        self._supervisor.extend()

    def force_expire(self) -> None:
        if self._status.disposed:
            return
        self._supervisor.force_expire()

    def attach_subscription(self, unsubscribe: UnsubscribeFn) -> None:
        self._unsubscribe = unsubscribe

    def dispose(self) -> None:
        if self._status.disposed:
            return
        self._status.disposed = True
        self._supervisor.stop()
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        if unsubscribe is not None:
            try:
                unsubscribe()
            except Exception:
                logger.exception("watchdog: releasing activity listeners failed")
        logger.debug("watchdog: disposed in state %s", self._status.state.value)


def create_watchdog(
    config: WatchdogConfig,
    notifier: Notifier,
    *,
    now_fn: Callable[[], float] | None = None,
    schedule_tick: ScheduleTickFn | None = None,
    subscribe: SubscribeFn | None = None,
    error_handler: ErrorHandler | None = None,
    tick_period_s: float = TICK_PERIOD_S,
    debounce_s: float = ACTIVITY_DEBOUNCE_S,
) -> WatchdogHandle:
    """Build a watchdog in the ACTIVE state and start its tick.

    Without ``schedule_tick`` the tick runs on the current asyncio loop, so
    the call must then happen inside a running loop.
    """
    now = now_fn or time.monotonic
    status = WatchdogStatus(state=WatchdogState.ACTIVE, last_activity=now())
    supervisor = TimeoutSupervisor(config, status, notifier, now_fn=now, error_handler=error_handler)
    recorder = ActivityRecorder(status, supervisor, now_fn=now, debounce_s=debounce_s)
    handle = WatchdogHandle(config, status, recorder, supervisor)

    supervisor.start(schedule_tick or asyncio_schedule_tick, tick_period_s)
    if subscribe is not None:
        try:
            handle.attach_subscription(subscribe(ACTIVITY_EVENTS, handle.record_activity))
        except Exception:
            handle.dispose()
            raise

    logger.debug(
        "watchdog: started budget=%.1fs warn_lead=%.1fs tick=%.2fs",
        config.total_budget_s,
        config.warn_lead_s,
        tick_period_s,
    )
    return handle


__all__ = ["SubscribeFn", "UnsubscribeFn", "WatchdogHandle", "create_watchdog"]
