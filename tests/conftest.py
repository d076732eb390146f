from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from maintrack.app.notifications import NotificationCenter
from maintrack.app.session_store import MemorySessionStore
from maintrack.clients.maintrack_sdk.envelope import Envelope
from maintrack.clients.maintrack_sdk.http_client import HttpClient

API_BASE_URL = "http://api.test"

Handler = Callable[[httpx.Request], httpx.Response]


class Clock:
    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.value = start

    def __call__(self) -> float:
        return self.value

    def advance(self, seconds: float) -> None:
        self.value += seconds


@pytest.fixture()
def clock() -> Clock:
    return Clock()


@pytest.fixture()
def session_store(clock: Clock) -> MemorySessionStore:
    return MemorySessionStore(now=clock)


@pytest.fixture()
def authed_store(session_store: MemorySessionStore) -> MemorySessionStore:
    session_store.set_token("token-123", ttl_days=7)
    return session_store


@pytest.fixture()
def notifications() -> NotificationCenter:
    return NotificationCenter()


def mock_async_client(handler: Handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=API_BASE_URL, transport=httpx.MockTransport(handler))


@pytest.fixture()
def make_http() -> Callable[[Handler], HttpClient]:
    def _make(handler: Handler) -> HttpClient:
        return HttpClient(base_url=API_BASE_URL, retry_backoff_ms=0, client=mock_async_client(handler))

    return _make

class FakeGateway:
    """In-memory list/create/delete gateway; gates hold a call open until set."""

    def __init__(self, rows=None, list_results=None) -> None:
        self.rows = list(rows or [])
        self.list_results = list(list_results or [])
        self.list_gates: list = []
        self.delete_gate = None
        self.list_calls = 0
        self.created: list = []
        self.deleted: list[str] = []
        self.create_result = Envelope.ok("Created")
        self.delete_result = Envelope.ok("Deleted")

    async def list(self, filters=None):
        self.list_calls += 1
        gate = self.list_gates.pop(0) if self.list_gates else None
        result = self.list_results.pop(0) if self.list_results else Envelope.ok("Loaded", list(self.rows))
        if gate is not None:
            await gate.wait()
        return result

    async def create(self, data):
        self.created.append(data)
        return self.create_result

    async def delete(self, entity_id):
        self.deleted.append(entity_id)
        if self.delete_gate is not None:
            await self.delete_gate.wait()
        return self.delete_result


@pytest.fixture()
def make_gateway() -> type[FakeGateway]:
    return FakeGateway
