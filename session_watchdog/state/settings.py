"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass

from session_watchdog.state.watchdog import WatchdogConfig


@dataclass(frozen=True, slots=True)
class WatchdogSettings:
    config: WatchdogConfig
    tick_period_s: float
    activity_debounce_s: float


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    receive_timeout_s: float


@dataclass(frozen=True, slots=True)
class AppSettings:
    watchdog: WatchdogSettings
    limits: LimitsSettings
    websocket: WebSocketSettings


__all__ = [
    "AppSettings",
    "LimitsSettings",
    "WatchdogSettings",
    "WebSocketSettings",
]
