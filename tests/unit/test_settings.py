from __future__ import annotations

import pytest

from session_watchdog import InvalidConfig
from session_watchdog.runtime.settings import load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "WATCHDOG_TOTAL_BUDGET_S",
        "WATCHDOG_WARN_LEAD_S",
        "WATCHDOG_TICK_PERIOD_S",
        "WATCHDOG_ACTIVITY_DEBOUNCE_S",
        "MAX_CONCURRENT_CONNECTIONS",
        "WS_RECEIVE_TIMEOUT_S",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_match_five_minute_budget() -> None:
    settings = load_settings()
    assert settings.watchdog.config.total_budget_s == 300.0
    assert settings.watchdog.config.warn_lead_s == 30.0
    assert settings.watchdog.tick_period_s == 1.0
    assert settings.watchdog.activity_debounce_s == 1.0
    assert settings.limits.max_concurrent_connections == 100
    assert settings.websocket.receive_timeout_s == 2.0


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WATCHDOG_TOTAL_BUDGET_S", "600")
    monkeypatch.setenv("WATCHDOG_WARN_LEAD_S", "60")
    monkeypatch.setenv("WATCHDOG_TICK_PERIOD_S", "0.5")
    monkeypatch.setenv("MAX_CONCURRENT_CONNECTIONS", "3")

    settings = load_settings()
    assert settings.watchdog.config.total_budget_s == 600.0
    assert settings.watchdog.config.warn_after_s == 540.0
    assert settings.watchdog.tick_period_s == 0.5
    assert settings.limits.max_concurrent_connections == 3


def test_unparseable_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WATCHDOG_TICK_PERIOD_S", "-1")
    monkeypatch.setenv("MAX_CONCURRENT_CONNECTIONS", "lots")
    monkeypatch.setenv("WS_RECEIVE_TIMEOUT_S", "soon")

    settings = load_settings()
    assert settings.watchdog.tick_period_s == 1.0
    assert settings.limits.max_concurrent_connections == 100
    assert settings.websocket.receive_timeout_s == 2.0


def test_lead_not_below_budget_fails_startup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WATCHDOG_TOTAL_BUDGET_S", "30")
    monkeypatch.setenv("WATCHDOG_WARN_LEAD_S", "30")

    with pytest.raises(InvalidConfig) as exc:
        load_settings()
    assert exc.value.field == "warn_lead_s"
