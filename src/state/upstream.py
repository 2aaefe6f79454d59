"""Upstream session lifecycle states (enum only)."""

from __future__ import annotations

from enum import Enum


class UpstreamState(Enum):
    ABSENT = "absent"
    CONNECTING = "connecting"
    ACTIVE = "active"


__all__ = ["UpstreamState"]
