"""Guarded notifier invocation."""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Callable

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[Exception], None]


def dispatch(
    callback: Callable[..., Any],
    *args: Any,
    event: str,
    error_handler: ErrorHandler | None = None,
) -> None:
    """Invoke a notifier callback, containing anything it raises.

    Failures are logged and forwarded to ``error_handler`` when one is set.
    """
    try:
        callback(*args)
    except Exception as exc:
        logger.exception("notifier %s callback failed", event)
        if error_handler is None:
            return
        try:
            error_handler(exc)
        except Exception:
            logger.exception("watchdog error handler failed while reporting %s", event)


__all__ = ["ErrorHandler", "dispatch"]
