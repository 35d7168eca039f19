"""Watchdog configuration and state types."""

from __future__ import annotations

import math
import enum
from dataclasses import dataclass

from session_watchdog.errors import InvalidConfig


class WatchdogState(str, enum.Enum):
    ACTIVE = "active"
    WARNING = "warning"
    EXPIRED = "expired"


def _as_seconds(field: str, value: object) -> float:
    if isinstance(value, bool):
        raise InvalidConfig(field, value, "must be a number")
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise InvalidConfig(field, value, "must be a number") from None


@dataclass(frozen=True, slots=True)
class WatchdogConfig:
    """Idle budget and warning lead, in seconds.

    Requires ``0 < warn_lead_s < total_budget_s``; anything else raises
    :class:`InvalidConfig` at construction.
    """

    total_budget_s: float
    warn_lead_s: float

    def __post_init__(self) -> None:
        total = _as_seconds("total_budget_s", self.total_budget_s)
        lead = _as_seconds("warn_lead_s", self.warn_lead_s)
        if not math.isfinite(total):
            raise InvalidConfig("total_budget_s", total, "must be finite")
        if not math.isfinite(lead):
            raise InvalidConfig("warn_lead_s", lead, "must be finite")
        if total <= 0:
            raise InvalidConfig("total_budget_s", total, "must be greater than zero")
        if lead <= 0:
            raise InvalidConfig("warn_lead_s", lead, "must be greater than zero")
        if lead >= total:
            raise InvalidConfig("warn_lead_s", lead, f"must be less than total_budget_s ({total})")
        object.__setattr__(self, "total_budget_s", total)
        object.__setattr__(self, "warn_lead_s", lead)

    @property
    def warn_after_s(self) -> float:
        """Idle time at which the countdown warning starts."""
        return self.total_budget_s - self.warn_lead_s


@dataclass(slots=True)
class WatchdogStatus:
    """Mutable state shared by the activity recorder and the supervisor."""

    state: WatchdogState
    last_activity: float
    disposed: bool = False

    @property
    def live(self) -> bool:
        return not self.disposed and self.state is not WatchdogState.EXPIRED


__all__ = ["WatchdogConfig", "WatchdogState", "WatchdogStatus"]
