"""Shared error types for the session watchdog."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InvalidConfig(Exception):
    """Raised when a watchdog budget/lead combination cannot be honored."""

    field: str
    value: object
    reason: str

    def __str__(self) -> str:
        return f"invalid watchdog config: {self.field}={self.value!r} ({self.reason})"


__all__ = ["InvalidConfig"]
