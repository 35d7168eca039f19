"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from session_watchdog.state.settings import AppSettings
    from session_watchdog.handlers.connections import ConnectionManager


@dataclass(slots=True)
class RuntimeDeps:
    connections: ConnectionManager
    settings: AppSettings

    async def shutdown(self) -> None:
        try:
            released = await self.connections.dispose_all()
        except Exception:
            logger.exception("runtime shutdown failed")
            return
        if released:
            logger.info("runtime: disposed %s live watchdog(s)", released)


__all__ = ["RuntimeDeps"]
