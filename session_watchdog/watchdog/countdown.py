"""Countdown arithmetic shared by the supervisor and hosts."""

from __future__ import annotations

import math

from session_watchdog.state.countdown import CountdownUrgency
from session_watchdog.config.watchdog import COUNTDOWN_CRITICAL_S, COUNTDOWN_ELEVATED_S


def seconds_remaining(total_budget_s: float, elapsed_s: float) -> int:
    """Whole seconds left before expiry, rounded up and never negative."""
    return max(0, math.ceil(total_budget_s - elapsed_s))


def countdown_urgency(seconds: int) -> CountdownUrgency:
    if seconds <= COUNTDOWN_CRITICAL_S:
        return CountdownUrgency.CRITICAL
    if seconds <= COUNTDOWN_ELEVATED_S:
        return CountdownUrgency.ELEVATED
    return CountdownUrgency.NORMAL


__all__ = ["countdown_urgency", "seconds_remaining"]
