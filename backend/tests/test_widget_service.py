"""Tests for the widget service - one controller per client, bounded in memory."""

import asyncio

import pytest

from gamehelp.services import widget_service as widget_module
from gamehelp.services.widget_service import WidgetService


@pytest.fixture
def builds(monkeypatch):
    """Count controller builds; each build yields to the loop once."""
    calls = []
    real_build = widget_module.build_controller

    async def counting_build(redis, client_id, send=None):
        calls.append(client_id)
        await asyncio.sleep(0)
        return await real_build(redis, client_id, send)

    monkeypatch.setattr(widget_module, "build_controller", counting_build)
    return calls


async def test_same_client_reuses_controller(redis, builds):
    service = WidgetService()
    first = await service.get_controller(redis, "alice")
    second = await service.get_controller(redis, "alice")
    assert first is second
    assert builds == ["alice"]


async def test_concurrent_first_requests_build_once(redis, builds):
    service = WidgetService()
    controllers = await asyncio.gather(
        *(service.get_controller(redis, "alice") for _ in range(5))
    )
    assert all(c is controllers[0] for c in controllers)
    assert builds == ["alice"]


async def test_least_recently_used_widget_evicted(redis, builds):
    service = WidgetService(max_widgets=2)
    await service.get_controller(redis, "alice")
    await service.get_controller(redis, "bob")
    await service.get_controller(redis, "alice")  # bob is now the oldest
    await service.get_controller(redis, "carol")

    assert set(service._controllers) == {"alice", "carol"}
    await service.get_controller(redis, "bob")
    assert builds == ["alice", "bob", "carol", "bob"]


async def test_pending_widget_not_evicted(redis, builds):
    service = WidgetService(max_widgets=1)
    busy = await service.get_controller(redis, "alice")
    busy.pending = True

    await service.get_controller(redis, "bob")
    assert "alice" in service._controllers

    busy.pending = False
    await service.get_controller(redis, "carol")
    assert set(service._controllers) == {"carol"}


async def test_evicted_client_reloads_its_chats(redis, relay):
    service = WidgetService(max_widgets=1)
    alice = await service.get_controller(redis, "alice")
    alice.send = relay.send
    await alice.submit("Where is the first boss?")

    await service.get_controller(redis, "bob")
    reloaded = await service.get_controller(redis, "alice")
    assert reloaded is not alice
    assert [s.title for s in reloaded.registry.list_sessions()] == ["Where is the first boss?"]


def test_drop():
    service = WidgetService()
    assert service.drop("nobody") is False
