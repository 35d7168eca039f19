"""Environment parsing for runtime settings."""

from __future__ import annotations

import os

from session_watchdog.state.watchdog import WatchdogConfig
from session_watchdog.state.settings import (
    AppSettings,
    LimitsSettings,
    WatchdogSettings,
    WebSocketSettings,
)
from session_watchdog.config.limits import (
    ENV_MAX_CONCURRENT_CONNECTIONS,
    DEFAULT_MAX_CONCURRENT_CONNECTIONS,
)
from session_watchdog.config.websocket import (
    ENV_WS_RECEIVE_TIMEOUT_S,
    DEFAULT_WS_RECEIVE_TIMEOUT_S,
)
from session_watchdog.config.watchdog import (
    TICK_PERIOD_S,
    ACTIVITY_DEBOUNCE_S,
    DEFAULT_WARN_LEAD_S,
    DEFAULT_TOTAL_BUDGET_S,
    ENV_WATCHDOG_WARN_LEAD_S,
    ENV_WATCHDOG_TICK_PERIOD_S,
    ENV_WATCHDOG_TOTAL_BUDGET_S,
    ENV_WATCHDOG_ACTIVITY_DEBOUNCE_S,
)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _positive_float_env(name: str, default: float) -> float:
    value = _float_env(name, default)
    return value if value > 0 else default


def _load_watchdog_settings() -> WatchdogSettings:
    # Budget and lead are not clamped: a bad pair must fail startup with InvalidConfig.
    config = WatchdogConfig(
        total_budget_s=_float_env(ENV_WATCHDOG_TOTAL_BUDGET_S, DEFAULT_TOTAL_BUDGET_S),
        warn_lead_s=_float_env(ENV_WATCHDOG_WARN_LEAD_S, DEFAULT_WARN_LEAD_S),
    )
    debounce = _float_env(ENV_WATCHDOG_ACTIVITY_DEBOUNCE_S, ACTIVITY_DEBOUNCE_S)
    return WatchdogSettings(
        config=config,
        tick_period_s=_positive_float_env(ENV_WATCHDOG_TICK_PERIOD_S, TICK_PERIOD_S),
        activity_debounce_s=max(0.0, debounce),
    )


def _load_limits_settings() -> LimitsSettings:
    max_connections = _int_env(ENV_MAX_CONCURRENT_CONNECTIONS, DEFAULT_MAX_CONCURRENT_CONNECTIONS)
    return LimitsSettings(max_concurrent_connections=max(1, max_connections))


def _load_websocket_settings() -> WebSocketSettings:
    return WebSocketSettings(
        receive_timeout_s=_positive_float_env(ENV_WS_RECEIVE_TIMEOUT_S, DEFAULT_WS_RECEIVE_TIMEOUT_S),
    )


def load_settings() -> AppSettings:
    return AppSettings(
        watchdog=_load_watchdog_settings(),
        limits=_load_limits_settings(),
        websocket=_load_websocket_settings(),
    )


__all__ = ["load_settings"]
