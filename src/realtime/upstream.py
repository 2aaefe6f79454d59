"""One upstream translation session: lifecycle, event mapping and item cleanup."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any
from collections import deque
from collections.abc import Callable, Awaitable

import orjson
from websockets.exceptions import ConnectionClosed, ConnectionClosedError

from src.state import UpstreamState
from src.errors import UpstreamConnectError
from src.state.settings import UpstreamSettings
from src.config.messages import (
    STATUS_LISTENING,
    ERROR_UPSTREAM_FALLBACK,
    ERROR_UPSTREAM_CONNECTION,
    STATUS_UPSTREAM_CONNECTED,
)

from .connector import UpstreamConnector
from .events import UpstreamEventKind, classify_event, parse_upstream_event
from .outbound import error_event, status_event, spanish_event, english_done_event, english_delta_event
from .commands import (
    commit_command,
    delete_item_command,
    append_audio_command,
    session_update_command,
    response_create_command,
)

logger = logging.getLogger(__name__)

BroadcastFn = Callable[[dict[str, Any]], Awaitable[int]]
EventHandlerFn = Callable[[dict[str, Any]], Awaitable[None]]


class UpstreamSession:
    """A single connection to the translation service.

    State moves ABSENT -> CONNECTING -> ACTIVE -> ABSENT and never restarts;
    a new `start` builds a new session. Every transition to ABSENT happens
    before any further I/O, so events that arrive after a teardown are dropped.
    """

    def __init__(
        self,
        *,
        connector: UpstreamConnector,
        settings: UpstreamSettings,
        broadcast: BroadcastFn,
        on_closed: Callable[[UpstreamSession], None] | None = None,
    ) -> None:
        self._connector = connector
        self._settings = settings
        self._broadcast = broadcast
        self._on_closed = on_closed

        self._ws: Any = None
        self._task: asyncio.Task | None = None
        self._state = UpstreamState.ABSENT
        self._closed_notified = False

        # Conversation items created upstream, deleted in FIFO order once the response is done.
        self._pending_item_ids: deque[str] = deque()

        self._handlers: dict[UpstreamEventKind, EventHandlerFn] = {
            UpstreamEventKind.TRANSCRIPTION_COMPLETED: self._on_transcription_completed,
            UpstreamEventKind.TRANSLATION_DELTA: self._on_translation_delta,
            UpstreamEventKind.TRANSLATION_DONE: self._on_translation_done,
            UpstreamEventKind.ITEM_CREATED: self._on_item_created,
            UpstreamEventKind.RESPONSE_DONE: self._on_response_done,
            UpstreamEventKind.ERROR: self._on_error,
        }

    @property
    def state(self) -> UpstreamState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is UpstreamState.ACTIVE

    @property
    def pending_item_ids(self) -> tuple[str, ...]:
        return tuple(self._pending_item_ids)

    def open(self, api_key: str) -> asyncio.Task:
        if self._task is not None:
            raise RuntimeError("upstream session was already opened")
        self._state = UpstreamState.CONNECTING
        self._task = asyncio.create_task(self._run(api_key))
        return self._task

    async def close(self) -> None:
        """Tear the session down. Safe to call repeatedly and from any state."""
        if self._state is UpstreamState.ABSENT and self._ws is None and self._task is None:
            return
        self._state = UpstreamState.ABSENT
        ws, self._ws = self._ws, None
        self._pending_item_ids.clear()

        task = self._task
        if task is not None and task is not asyncio.current_task() and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await task

        if ws is not None:
            with contextlib.suppress(Exception):
                await ws.close()
        self._notify_closed()

    async def append_audio(self, audio: str) -> bool:
        if not self.is_active:
            return False
        return await self._send(append_audio_command(audio))

    async def commit(self) -> bool:
        if not self.is_active:
            return False
        if not await self._send(commit_command()):
            return False
        return await self._send(response_create_command(self._settings.translation_instructions))

    async def handle_event(self, event: dict[str, Any]) -> None:
        kind = classify_event(event)
        if kind is None:
            return
        await self._handlers[kind](event)

    async def _run(self, api_key: str) -> None:
        try:
            try:
                ws = await self._connector.connect(api_key)
            except UpstreamConnectError as exc:
                logger.warning("upstream: connection failed: %s", exc.reason)
                if self._state is UpstreamState.CONNECTING:
                    await self._broadcast(error_event(ERROR_UPSTREAM_CONNECTION))
                return

            if self._state is not UpstreamState.CONNECTING:
                # Torn down while the handshake was in flight.
                with contextlib.suppress(Exception):
                    await ws.close()
                return

            self._ws = ws
            self._state = UpstreamState.ACTIVE
            logger.info("upstream: session active")
            await self._send(session_update_command(self._settings))
            await self._broadcast(status_event(STATUS_UPSTREAM_CONNECTED))
            await self._receive_loop(ws)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("upstream: session task failed")
        finally:
            ws, self._ws = self._ws, None
            self._state = UpstreamState.ABSENT
            self._pending_item_ids.clear()
            if ws is not None:
                with contextlib.suppress(Exception):
                    await ws.close()
            self._notify_closed()

    async def _receive_loop(self, ws: Any) -> None:
        try:
            async for raw in ws:
                if self._state is not UpstreamState.ACTIVE:
                    return
                event = parse_upstream_event(raw)
                if event is None:
                    continue
                await self.handle_event(event)
        except ConnectionClosedError as exc:
            if self._state is UpstreamState.ACTIVE:
                logger.warning("upstream: connection lost: %s", exc)
                await self._broadcast(error_event(ERROR_UPSTREAM_CONNECTION))
            return
        logger.info("upstream: connection closed")

    async def _send(self, command: dict[str, Any]) -> bool:
        ws = self._ws
        if ws is None:
            return False
        try:
            await ws.send(orjson.dumps(command).decode("utf-8"))
        except ConnectionClosed:
            return False
        except Exception:
            logger.debug("upstream send failed type=%s", command.get("type"), exc_info=True)
            return False
        return True

    def _notify_closed(self) -> None:
        if self._closed_notified:
            return
        self._closed_notified = True
        if self._on_closed is not None:
            self._on_closed(self)

    async def _on_transcription_completed(self, event: dict[str, Any]) -> None:
        transcript = event.get("transcript")
        if not isinstance(transcript, str):
            return
        text = transcript.strip()
        if text:
            await self._broadcast(spanish_event(text))

    async def _on_translation_delta(self, event: dict[str, Any]) -> None:
        delta = event.get("delta")
        if isinstance(delta, str) and delta:
            await self._broadcast(english_delta_event(delta))

    async def _on_translation_done(self, _event: dict[str, Any]) -> None:
        await self._broadcast(english_done_event())

    async def _on_item_created(self, event: dict[str, Any]) -> None:
        item = event.get("item")
        item_id = item.get("id") if isinstance(item, dict) else None
        if not isinstance(item_id, str) or not item_id:
            return
        if item_id in self._pending_item_ids:
            return
        self._pending_item_ids.append(item_id)

    async def _on_response_done(self, _event: dict[str, Any]) -> None:
        while self._pending_item_ids:
            item_id = self._pending_item_ids.popleft()
            await self._send(delete_item_command(item_id))
        await self._broadcast(status_event(STATUS_LISTENING))

    async def _on_error(self, event: dict[str, Any]) -> None:
        error = event.get("error")
        message = error.get("message") if isinstance(error, dict) else None
        if not isinstance(message, str) or not message:
            message = ERROR_UPSTREAM_FALLBACK
        logger.warning("upstream: error event: %s", message)
        await self._broadcast(error_event(message))


__all__ = ["BroadcastFn", "UpstreamSession"]
