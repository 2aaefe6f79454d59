"""Configuration module exports (env-resolved constants only)."""

from .websocket import WS_ENDPOINT_PATH

__all__ = [
    "WS_ENDPOINT_PATH",
]
