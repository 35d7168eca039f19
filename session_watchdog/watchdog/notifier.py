"""Callback surface through which the watchdog reports state changes."""

from __future__ import annotations

from typing import Protocol


class Notifier(Protocol):
    """Fire-and-forget sink for watchdog events.

    Return values are ignored. ``on_tick`` repeats once per tick while the
    warning is showing; the other callbacks fire at most once per event.
    """

    def on_warn(self, seconds_remaining: int) -> None: ...

    def on_tick(self, seconds_remaining: int) -> None: ...

    def on_resume(self) -> None: ...

    def on_expire(self) -> None: ...


__all__ = ["Notifier"]
