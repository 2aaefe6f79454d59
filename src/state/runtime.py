"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from src.state.settings import AppSettings
    from src.handlers.session import RelaySession


@dataclass(slots=True)
class RuntimeDeps:
    relay: RelaySession
    settings: AppSettings

    async def shutdown(self) -> None:
        try:
            await self.relay.shutdown()
        except Exception:
            logger.exception("runtime shutdown failed")


__all__ = ["RuntimeDeps"]
