"""Shared test fixtures - uses fakeredis so no Redis server is needed."""

import pytest
from fakeredis import aioredis as fake_aioredis
from httpx import ASGITransport, AsyncClient

from gamehelp.core.carousel import Carousel
from gamehelp.core.controller import ChatController
from gamehelp.core.registry import ChatSessionRegistry
from gamehelp.core.renderer import ChatLog, ChatRenderer
from gamehelp.core.sidebar import SidebarView
from gamehelp.core.store import PersistentStore
from gamehelp.db.redis import client_namespace, get_redis
from gamehelp.schemas.game import GameCard
from gamehelp.services.widget_service import widget_service

CARDS = [
    GameCard(title="Dark Souls III", game="Dark Souls III"),
    GameCard(title="Elden Ring", game="Elden Ring"),
    GameCard(title="Something else"),
]


class FakeRelay:
    """Stand-in for the relay: records calls and echoes a canned reply."""

    def __init__(self, reply: str = "Try the High Wall of Lothric first."):
        self.reply = reply
        self.calls: list[tuple[str, str]] = []
        self.error: Exception | None = None

    async def send(self, message: str, context: str) -> str:
        self.calls.append((message, context))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
async def redis():
    client = fake_aioredis.FakeRedis(decode_responses=True)
    yield client
    await client.flushall()
    await client.aclose()


@pytest.fixture
def store(redis):
    return PersistentStore(redis, client_namespace("test-client"))


@pytest.fixture
async def registry(store):
    return await ChatSessionRegistry.load(store)


@pytest.fixture
def relay():
    return FakeRelay()


@pytest.fixture
def controller(registry, relay):
    renderer = ChatRenderer(ChatLog())
    ctl = ChatController(
        registry=registry,
        carousel=Carousel(CARDS),
        renderer=renderer,
        sidebar=SidebarView(registry, renderer),
        send=relay.send,
    )
    ctl.restore()
    return ctl


@pytest.fixture
async def client(redis):
    """Async HTTP test client backed by fakeredis."""
    from gamehelp.main import app

    async def _override_get_redis():
        return redis

    app.dependency_overrides[get_redis] = _override_get_redis
    widget_service.clear()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    widget_service.clear()
