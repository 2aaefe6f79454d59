"""WebSocket protocol configuration and constants."""

from __future__ import annotations

import os

ENV_WS_ENDPOINT_PATH = "WS_ENDPOINT_PATH"
DEFAULT_WS_ENDPOINT_PATH = "/"

# Resolved at import time: the FastAPI route decorator needs it.
WS_ENDPOINT_PATH: str = (os.getenv(ENV_WS_ENDPOINT_PATH) or "").strip() or DEFAULT_WS_ENDPOINT_PATH

# Connection classification
WS_ROLE_QUERY_PARAM = "role"
WS_ROLE_SPEAKER = "speaker"

# Close codes
WS_CLOSE_BUSY_CODE = 4002

# Message keys
WS_KEY_TYPE = "type"
WS_KEY_API_KEY = "apiKey"
WS_KEY_AUDIO = "audio"
WS_KEY_MESSAGE = "message"
WS_KEY_TEXT = "text"
WS_KEY_DELTA = "delta"

# Speaker -> relay message types
WS_TYPE_START = "start"
WS_TYPE_AUDIO = "audio"
WS_TYPE_COMMIT = "commit"
WS_TYPE_STOP = "stop"

# Relay -> client event types
WS_EVENT_STATUS = "status"
WS_EVENT_ERROR = "error"
WS_EVENT_SESSION_ENDED = "session_ended"
WS_EVENT_SPANISH = "spanish"
WS_EVENT_ENGLISH_DELTA = "english_delta"
WS_EVENT_ENGLISH_DONE = "english_done"

__all__ = [
    "DEFAULT_WS_ENDPOINT_PATH",
    "ENV_WS_ENDPOINT_PATH",
    "WS_ENDPOINT_PATH",
    "WS_ROLE_QUERY_PARAM",
    "WS_ROLE_SPEAKER",
    "WS_CLOSE_BUSY_CODE",
    "WS_KEY_TYPE",
    "WS_KEY_API_KEY",
    "WS_KEY_AUDIO",
    "WS_KEY_MESSAGE",
    "WS_KEY_TEXT",
    "WS_KEY_DELTA",
    "WS_TYPE_START",
    "WS_TYPE_AUDIO",
    "WS_TYPE_COMMIT",
    "WS_TYPE_STOP",
    "WS_EVENT_STATUS",
    "WS_EVENT_ERROR",
    "WS_EVENT_SESSION_ENDED",
    "WS_EVENT_SPANISH",
    "WS_EVENT_ENGLISH_DELTA",
    "WS_EVENT_ENGLISH_DONE",
]
