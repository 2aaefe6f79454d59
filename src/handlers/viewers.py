"""Registry of connected viewer sockets."""

from __future__ import annotations

from typing import Any


class ViewerRegistry:
    def __init__(self) -> None:
        self._viewers: set[Any] = set()

    def add(self, ws: Any) -> None:
        self._viewers.add(ws)

    def discard(self, ws: Any) -> None:
        self._viewers.discard(ws)

    def snapshot(self) -> list[Any]:
        """Copy of the current members, safe to iterate across awaits."""
        return list(self._viewers)

    def get_viewer_count(self) -> int:
        return len(self._viewers)

    def __contains__(self, ws: object) -> bool:
        return ws in self._viewers

    def __len__(self) -> int:
        return len(self._viewers)


__all__ = ["ViewerRegistry"]
