"""Logging initialization."""

from __future__ import annotations

import os
import logging

from session_watchdog.config.logging import LOG_LEVEL, LOG_FORMAT


def configure_logging() -> None:
    # Per-frame websocket logs from uvicorn drown out watchdog transitions.
    if (os.getenv("SHOW_TRANSPORT_LOGS") or "").strip().lower() not in {"1", "true", "yes"}:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
        logging.getLogger("websockets").setLevel(logging.WARNING)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


__all__ = ["configure_logging"]
