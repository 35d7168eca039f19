"""WebSocket connection admission control and watchdog ownership."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from session_watchdog.watchdog import WatchdogHandle

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Admit up to ``max_connections`` sockets and track each one's watchdog.

    Releasing a connection disposes its watchdog, so a dropped socket never
    leaves a tick running on the loop.
    """

    def __init__(self, *, max_connections: int) -> None:
        self._max = max(1, int(max_connections))
        self._lock = asyncio.Lock()
        # Starlette sockets are unhashable; the entry holds the socket so its id stays reserved.
        self._active: dict[int, tuple[Any, WatchdogHandle | None]] = {}

    async def connect(self, ws: Any) -> bool:
        """Attempt to admit a websocket connection (without accepting it)."""
        key = id(ws)
        async with self._lock:
            if key in self._active:
                return True
            if len(self._active) >= self._max:
                return False
            self._active[key] = (ws, None)
            return True

    def attach(self, ws: Any, handle: WatchdogHandle) -> None:
        entry = self._active.get(id(ws))
        if entry is None or entry[0] is not ws:
            handle.dispose()
            raise RuntimeError("cannot attach a watchdog to a connection that was not admitted")
        previous = entry[1]
        if previous is not None and previous is not handle:
            logger.warning("replacing the watchdog of a live connection; disposing the old one")
            previous.dispose()
        self._active[id(ws)] = (ws, handle)

    async def disconnect(self, ws: Any) -> None:
        async with self._lock:
            entry = self._active.pop(id(ws), None)
        if entry is not None and entry[1] is not None:
            entry[1].dispose()

    async def dispose_all(self) -> int:
        async with self._lock:
            handles = [handle for _, handle in self._active.values() if handle is not None]
            self._active.clear()
        for handle in handles:
            handle.dispose()
        return len(handles)

    def get_connection_count(self) -> int:
        return len(self._active)


__all__ = ["ConnectionManager"]
