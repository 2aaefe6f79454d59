from __future__ import annotations

import sys
import json
import time
import asyncio
from typing import Any
from pathlib import Path
from collections.abc import Callable

import pytest
import pytest_asyncio
from starlette.websockets import WebSocketState
from websockets.exceptions import ConnectionClosedOK


def pytest_configure() -> None:
    # Keep `import src...` working when running `pytest` from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


_END = object()


class FakeWebSocket:
    """In-memory stand-in for a Starlette WebSocket."""

    def __init__(self, *, query_params: dict[str, str] | None = None, connected: bool = False) -> None:
        state = WebSocketState.CONNECTED if connected else WebSocketState.CONNECTING
        self.client_state = state
        self.application_state = state
        self.query_params = dict(query_params or {})
        self.sent: list[str] = []
        self.fail_sends = False
        self.close_code: int | None = None
        self.close_reason: str | None = None
        self._inbox: asyncio.Queue[dict[str, Any]] = asyncio.Queue()

    async def accept(self) -> None:
        self.client_state = WebSocketState.CONNECTED
        self.application_state = WebSocketState.CONNECTED

    async def send_text(self, text: str) -> None:
        if self.fail_sends or self.application_state != WebSocketState.CONNECTED:
            raise RuntimeError("socket is not writable")
        self.sent.append(text)

    async def close(self, code: int = 1000, reason: str | None = None) -> None:
        self.close_code = code
        self.close_reason = reason
        self.application_state = WebSocketState.DISCONNECTED

    async def receive(self) -> dict[str, Any]:
        message = await self._inbox.get()
        if message["type"] == "websocket.disconnect":
            self.client_state = WebSocketState.DISCONNECTED
        return message

    def push_text(self, text: str) -> None:
        self._inbox.put_nowait({"type": "websocket.receive", "text": text})

    def push_json(self, payload: Any) -> None:
        self.push_text(json.dumps(payload))

    def disconnect(self, code: int = 1000) -> None:
        self._inbox.put_nowait({"type": "websocket.disconnect", "code": code})

    def events(self) -> list[dict[str, Any]]:
        return [json.loads(text) for text in self.sent]


class FakeUpstream:
    """Stand-in for a websockets client connection to the translation service."""

    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []
        self.closed = False
        self._inbox: asyncio.Queue[Any] = asyncio.Queue()

    async def send(self, text: str) -> None:
        if self.closed:
            raise ConnectionClosedOK(None, None)
        self.sent.append(json.loads(text))

    async def close(self) -> None:
        self.closed = True
        self._inbox.put_nowait(_END)

    def push(self, event: dict[str, Any] | str) -> None:
        self._inbox.put_nowait(event if isinstance(event, str) else json.dumps(event))

    def finish(self) -> None:
        self._inbox.put_nowait(_END)

    def fail(self, exc: BaseException) -> None:
        self._inbox.put_nowait(exc)

    def sent_types(self) -> list[str]:
        return [command["type"] for command in self.sent]

    def __aiter__(self) -> FakeUpstream:
        return self

    async def __anext__(self) -> str:
        item = await self._inbox.get()
        if item is _END:
            raise StopAsyncIteration
        if isinstance(item, BaseException):
            raise item
        return item


class FakeConnector:
    endpoint = "wss://realtime.test/v1/realtime?model=test-model"

    def __init__(self, *, error: Exception | None = None) -> None:
        self.error = error
        self.api_keys: list[str] = []
        self.connections: list[FakeUpstream] = []
        # Cleared to hold handshakes open; tests set it to let them finish.
        self.gate = asyncio.Event()
        self.gate.set()

    async def connect(self, api_key: str) -> FakeUpstream:
        self.api_keys.append(api_key)
        await self.gate.wait()
        if self.error is not None:
            raise self.error
        upstream = FakeUpstream()
        self.connections.append(upstream)
        return upstream

    @property
    def latest(self) -> FakeUpstream:
        return self.connections[-1]


class EventRecorder:
    """Collects broadcast events in place of the fan-out."""

    def __init__(self) -> None:
        self.events: list[dict[str, Any]] = []

    async def __call__(self, event: dict[str, Any]) -> int:
        self.events.append(event)
        return 1

    def types(self) -> list[str]:
        return [event["type"] for event in self.events]


async def _wait_until(predicate: Callable[[], bool], timeout: float = 1.0) -> None:
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("condition not met before timeout")
        await asyncio.sleep(0.001)


@pytest.fixture
def wait_until() -> Callable[..., Any]:
    return _wait_until


@pytest.fixture
def make_ws() -> Callable[..., FakeWebSocket]:
    def _make(*, role: str | None = None, connected: bool = False) -> FakeWebSocket:
        params = {"role": role} if role is not None else {}
        return FakeWebSocket(query_params=params, connected=connected)

    return _make


@pytest.fixture
def upstream_settings():
    from src.state.settings import UpstreamSettings
    from src.config.upstream import (
        SESSION_INSTRUCTIONS,
        UPSTREAM_AUDIO_FORMAT,
        TRANSLATION_INSTRUCTIONS,
        DEFAULT_OPENAI_REALTIME_URL,
        DEFAULT_OPENAI_REALTIME_MODEL,
        DEFAULT_OPENAI_REALTIME_VOICE,
        DEFAULT_UPSTREAM_SAMPLE_RATE_HZ,
        DEFAULT_UPSTREAM_OPEN_TIMEOUT_S,
        DEFAULT_OPENAI_TRANSCRIPTION_MODEL,
        DEFAULT_UPSTREAM_MAX_MESSAGE_BYTES,
    )

    return UpstreamSettings(
        url=DEFAULT_OPENAI_REALTIME_URL,
        model=DEFAULT_OPENAI_REALTIME_MODEL,
        transcription_model=DEFAULT_OPENAI_TRANSCRIPTION_MODEL,
        voice=DEFAULT_OPENAI_REALTIME_VOICE,
        audio_format=UPSTREAM_AUDIO_FORMAT,
        sample_rate_hz=DEFAULT_UPSTREAM_SAMPLE_RATE_HZ,
        open_timeout_s=DEFAULT_UPSTREAM_OPEN_TIMEOUT_S,
        max_message_bytes=DEFAULT_UPSTREAM_MAX_MESSAGE_BYTES,
        session_instructions=SESSION_INSTRUCTIONS,
        translation_instructions=TRANSLATION_INSTRUCTIONS,
    )


@pytest.fixture
def connector() -> FakeConnector:
    return FakeConnector()


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest_asyncio.fixture
async def relay(connector, upstream_settings):
    from src.handlers.session import RelaySession

    relay = RelaySession(connector=connector, upstream_settings=upstream_settings)
    yield relay
    await relay.shutdown()
