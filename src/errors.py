"""Shared error types for the translation relay."""

from __future__ import annotations


class UpstreamConnectError(Exception):
    """Raised when the translation service connection cannot be opened."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


__all__ = ["UpstreamConnectError"]
