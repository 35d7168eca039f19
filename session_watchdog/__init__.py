"""Session inactivity watchdog.

Keep this module dependency-light: the watchdog core imports only the
standard library, so hosts that do not serve WebSockets need no FastAPI.
"""

from .errors import InvalidConfig
from .state.countdown import CountdownUrgency
from .state.watchdog import WatchdogState, WatchdogConfig
from .watchdog import Notifier, WatchdogHandle, create_watchdog, countdown_urgency

__all__ = [
    "CountdownUrgency",
    "InvalidConfig",
    "Notifier",
    "WatchdogConfig",
    "WatchdogHandle",
    "WatchdogState",
    "countdown_urgency",
    "create_watchdog",
]
