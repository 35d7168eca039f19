"""Per-connection activity event fan-out."""

from __future__ import annotations

from collections.abc import Callable, Iterable

Handler = Callable[[], None]


class ActivityEventHub:
    """Routes named input events reported by the page to subscribed handlers.

    Plays the part of the page's event listeners: the watchdog subscribes to
    the events it treats as activity and releases them on dispose.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}

    def subscribe(self, events: Iterable[str], handler: Handler) -> Callable[[], None]:
        names = tuple(dict.fromkeys(events))
        for name in names:
            self._handlers.setdefault(name, []).append(handler)

        def unsubscribe() -> None:
            for name in names:
                handlers = self._handlers.get(name)
                if not handlers or handler not in handlers:
                    continue
                handlers.remove(handler)
                if not handlers:
                    del self._handlers[name]

        return unsubscribe

    def emit(self, event: str) -> bool:
        """Deliver ``event``; returns False when nobody listens for it."""
        handlers = self._handlers.get(event)
        if not handlers:
            return False
        for handler in list(handlers):
            handler()
        return True

    def listener_count(self) -> int:
        return sum(len(handlers) for handlers in self._handlers.values())


__all__ = ["ActivityEventHub"]
