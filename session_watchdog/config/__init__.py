"""Configuration module exports (constants only)."""

from .watchdog import (
    TICK_PERIOD_S,
    ACTIVITY_EVENTS,
    ACTIVITY_DEBOUNCE_S,
    DEFAULT_WARN_LEAD_S,
    DEFAULT_TOTAL_BUDGET_S,
)

__all__ = [
    "ACTIVITY_DEBOUNCE_S",
    "ACTIVITY_EVENTS",
    "DEFAULT_TOTAL_BUDGET_S",
    "DEFAULT_WARN_LEAD_S",
    "TICK_PERIOD_S",
]
