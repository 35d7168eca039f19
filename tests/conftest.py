from __future__ import annotations

import pytest

from session_watchdog import WatchdogConfig, create_watchdog
from tests.utils import FakeClock, RecordingNotifier


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def make_watchdog(clock: FakeClock, notifier: RecordingNotifier):
    """Build a watchdog on the simulated clock; budget/lead default to 300s/30s."""

    def _make(total_budget_s: float = 300.0, warn_lead_s: float = 30.0, **kwargs):
        kwargs.setdefault("now_fn", clock.now)
        kwargs.setdefault("schedule_tick", clock.schedule_tick)
        return create_watchdog(WatchdogConfig(total_budget_s, warn_lead_s), notifier, **kwargs)

    return _make
