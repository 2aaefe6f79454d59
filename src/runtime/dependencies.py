"""Runtime dependency construction (relay session + upstream connector)."""

from __future__ import annotations

import logging

from src.state import RuntimeDeps
from src.state.settings import AppSettings
from src.handlers.session import RelaySession
from src.realtime.connector import UpstreamConnector

from .settings import load_settings

logger = logging.getLogger(__name__)


def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()

    connector = UpstreamConnector(
        url=settings.upstream.url,
        model=settings.upstream.model,
        open_timeout_s=settings.upstream.open_timeout_s,
        max_message_bytes=settings.upstream.max_message_bytes,
    )
    relay = RelaySession(connector=connector, upstream_settings=settings.upstream)
    logger.info("runtime: upstream endpoint %s", connector.endpoint)

    return RuntimeDeps(relay=relay, settings=settings)


__all__ = ["RuntimeDeps", "build_runtime_deps"]
