"""Watchdog timing configuration and constants."""

from __future__ import annotations

ENV_WATCHDOG_TOTAL_BUDGET_S = "WATCHDOG_TOTAL_BUDGET_S"
ENV_WATCHDOG_WARN_LEAD_S = "WATCHDOG_WARN_LEAD_S"
ENV_WATCHDOG_TICK_PERIOD_S = "WATCHDOG_TICK_PERIOD_S"
ENV_WATCHDOG_ACTIVITY_DEBOUNCE_S = "WATCHDOG_ACTIVITY_DEBOUNCE_S"

# Five minutes of inactivity, countdown shown for the last thirty seconds.
DEFAULT_TOTAL_BUDGET_S: float = 300.0
DEFAULT_WARN_LEAD_S: float = 30.0

# Supervisor tick period and activity coalescing window.
TICK_PERIOD_S: float = 1.0
ACTIVITY_DEBOUNCE_S: float = 1.0

# Host input events that count as user activity.
ACTIVITY_EVENTS: tuple[str, ...] = (
    "mousedown",
    "keydown",
    "scroll",
    "touchstart",
    "mousemove",
    "click",
)

# Countdown urgency thresholds (seconds remaining, inclusive).
COUNTDOWN_ELEVATED_S: int = 20
COUNTDOWN_CRITICAL_S: int = 10

__all__ = [
    "ACTIVITY_DEBOUNCE_S",
    "ACTIVITY_EVENTS",
    "COUNTDOWN_CRITICAL_S",
    "COUNTDOWN_ELEVATED_S",
    "DEFAULT_TOTAL_BUDGET_S",
    "DEFAULT_WARN_LEAD_S",
    "ENV_WATCHDOG_ACTIVITY_DEBOUNCE_S",
    "ENV_WATCHDOG_TICK_PERIOD_S",
    "ENV_WATCHDOG_TOTAL_BUDGET_S",
    "ENV_WATCHDOG_WARN_LEAD_S",
    "TICK_PERIOD_S",
]
