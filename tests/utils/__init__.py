"""Test utilities.

Focused modules:
- clock.py: simulated monotonic clock and tick scheduler
- notifier.py: notifier that records every callback
"""

from __future__ import annotations

from .clock import FakeClock
from .notifier import RecordingNotifier

__all__ = ["FakeClock", "RecordingNotifier"]
