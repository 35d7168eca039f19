from .notifier import Notifier
from .supervisor import TimeoutSupervisor
from .recorder import ActivityRecorder
from .scheduler import AsyncioTickScheduler
from .handle import WatchdogHandle, create_watchdog
from .countdown import countdown_urgency, seconds_remaining

__all__ = [
    "ActivityRecorder",
    "AsyncioTickScheduler",
    "Notifier",
    "TimeoutSupervisor",
    "WatchdogHandle",
    "countdown_urgency",
    "create_watchdog",
    "seconds_remaining",
]
