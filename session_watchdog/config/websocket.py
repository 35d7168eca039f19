"""WebSocket protocol configuration and constants."""

from __future__ import annotations

WS_ENDPOINT_PATH = "/ws"

# Envelope keys
WS_KEY_TYPE = "type"
WS_KEY_SESSION_ID = "session_id"
WS_KEY_PAYLOAD = "payload"

WS_UNKNOWN_SESSION_ID = "unknown"

# Close codes
WS_CLOSE_CLIENT_REQUEST_CODE = 1000
WS_CLOSE_BUSY_CODE = 4002
WS_CLOSE_EXPIRED_CODE = 4003

WS_CLOSE_EXPIRED_REASON = "session expired"

# Receive polling
ENV_WS_RECEIVE_TIMEOUT_S = "WS_RECEIVE_TIMEOUT_S"
DEFAULT_WS_RECEIVE_TIMEOUT_S: float = 2.0

# Client -> server message types
WS_MSG_ACTIVITY = "activity"
WS_MSG_EXTEND = "extend"
WS_MSG_LOGOUT = "logout"
WS_MSG_PING = "ping"
WS_MSG_END = "end"

# Server -> client message types
WS_EVT_STARTED = "session.started"
WS_EVT_WARNING = "session.warning"
WS_EVT_TICK = "session.tick"
WS_EVT_RESUMED = "session.resumed"
WS_EVT_EXTENDED = "session.extended"
WS_EVT_EXPIRED = "session.expired"
WS_EVT_PONG = "pong"
WS_EVT_SESSION_END = "session_end"
WS_EVT_ERROR = "error"

# Errors (payload.code values)
WS_ERROR_SERVER_AT_CAPACITY = "server_at_capacity"
WS_ERROR_INVALID_MESSAGE = "invalid_message"
WS_ERROR_INVALID_PAYLOAD = "invalid_payload"
WS_ERROR_SESSION_EXPIRED = "session_expired"

__all__ = [
    "DEFAULT_WS_RECEIVE_TIMEOUT_S",
    "ENV_WS_RECEIVE_TIMEOUT_S",
    "WS_CLOSE_BUSY_CODE",
    "WS_CLOSE_CLIENT_REQUEST_CODE",
    "WS_CLOSE_EXPIRED_CODE",
    "WS_CLOSE_EXPIRED_REASON",
    "WS_ENDPOINT_PATH",
    "WS_ERROR_INVALID_MESSAGE",
    "WS_ERROR_INVALID_PAYLOAD",
    "WS_ERROR_SERVER_AT_CAPACITY",
    "WS_ERROR_SESSION_EXPIRED",
    "WS_EVT_ERROR",
    "WS_EVT_EXPIRED",
    "WS_EVT_EXTENDED",
    "WS_EVT_PONG",
    "WS_EVT_RESUMED",
    "WS_EVT_SESSION_END",
    "WS_EVT_STARTED",
    "WS_EVT_TICK",
    "WS_EVT_WARNING",
    "WS_KEY_PAYLOAD",
    "WS_KEY_SESSION_ID",
    "WS_KEY_TYPE",
    "WS_MSG_ACTIVITY",
    "WS_MSG_END",
    "WS_MSG_EXTEND",
    "WS_MSG_LOGOUT",
    "WS_MSG_PING",
    "WS_UNKNOWN_SESSION_ID",
]
