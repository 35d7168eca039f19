from .runtime import RuntimeDeps
from .envelope import EnvelopeState
from .countdown import CountdownUrgency
from .settings import AppSettings, WatchdogSettings
from .watchdog import WatchdogState, WatchdogConfig, WatchdogStatus

__all__ = [
    "AppSettings",
    "CountdownUrgency",
    "EnvelopeState",
    "RuntimeDeps",
    "WatchdogConfig",
    "WatchdogSettings",
    "WatchdogState",
    "WatchdogStatus",
]
