"""Runtime dependency construction (settings + admission control)."""

from __future__ import annotations

import logging

from session_watchdog.state import RuntimeDeps
from session_watchdog.handlers.connections import ConnectionManager

from .settings import load_settings

logger = logging.getLogger(__name__)


async def build_runtime_deps() -> RuntimeDeps:
    settings = load_settings()
    connections = ConnectionManager(max_connections=settings.limits.max_concurrent_connections)
    logger.info(
        "runtime: idle budget=%.1fs warn_lead=%.1fs max_connections=%s",
        settings.watchdog.config.total_budget_s,
        settings.watchdog.config.warn_lead_s,
        settings.limits.max_concurrent_connections,
    )
    return RuntimeDeps(connections=connections, settings=settings)


__all__ = ["RuntimeDeps", "build_runtime_deps"]
