"""Runtime package.

Settings loading and dependency wiring for the WebSocket host. Importing
`session_watchdog.runtime.*` must not start any timers.
"""

__all__: list[str] = []
