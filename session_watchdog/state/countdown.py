"""Countdown urgency levels surfaced alongside warning ticks."""

from __future__ import annotations

import enum


class CountdownUrgency(str, enum.Enum):
    NORMAL = "normal"
    ELEVATED = "elevated"
    CRITICAL = "critical"


__all__ = ["CountdownUrgency"]
