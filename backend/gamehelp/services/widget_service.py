"""Widget service - keeps one chat controller per browser client."""

import asyncio
from collections import OrderedDict

import redis.asyncio as aioredis
from loguru import logger

from gamehelp.config import settings
from gamehelp.core.carousel import Carousel
from gamehelp.core.controller import ChatController, SendFn
from gamehelp.core.registry import ChatSessionRegistry
from gamehelp.core.renderer import ChatLog, ChatRenderer
from gamehelp.core.sidebar import SidebarView
from gamehelp.core.store import PersistentStore
from gamehelp.db.redis import client_namespace
from gamehelp.services.game_service import game_service
from gamehelp.services.relay_client import build_sender


async def build_controller(
    redis: aioredis.Redis, client_id: str, send: SendFn | None = None
) -> ChatController:
    """Wire a controller for one client: load its chats and draw the initial view."""
    store = PersistentStore(redis, client_namespace(client_id))
    registry = await ChatSessionRegistry.load(store)
    renderer = ChatRenderer(ChatLog(), markup=settings.RENDER_MARKDOWN)
    controller = ChatController(
        registry=registry,
        carousel=Carousel(game_service.list_cards()),
        renderer=renderer,
        sidebar=SidebarView(registry, renderer),
        send=send or build_sender(),
    )
    controller.restore()
    return controller


class WidgetService:
    def __init__(self, max_widgets: int | None = None):
        self.max_widgets = max_widgets or settings.MAX_WIDGETS
        self._controllers: OrderedDict[str, ChatController] = OrderedDict()
        self._locks: dict[str, asyncio.Lock] = {}

    async def get_controller(self, redis: aioredis.Redis, client_id: str) -> ChatController:
        """Return the client's controller, loading it from storage on first use."""
        controller = self._controllers.get(client_id)
        if controller is None:
            lock = self._locks.setdefault(client_id, asyncio.Lock())
            async with lock:
                # Another request may have built it while we waited
                controller = self._controllers.get(client_id)
                if controller is None:
                    controller = await build_controller(redis, client_id)
                    self._controllers[client_id] = controller
                    logger.info(
                        f"Loaded widget for {client_id} "
                        f"({len(controller.registry.list_sessions())} chats)"
                    )
        self._controllers.move_to_end(client_id)
        self._evict(keep=client_id)
        return controller

    def _evict(self, keep: str) -> None:
        """Drop least recently used idle widgets beyond the limit. Stored chats remain."""
        for client_id in list(self._controllers):
            if len(self._controllers) <= self.max_widgets:
                break
            if client_id != keep and not self._controllers[client_id].pending:
                del self._controllers[client_id]
                self._locks.pop(client_id, None)
                logger.debug(f"Evicted idle widget for {client_id}")

    def drop(self, client_id: str) -> bool:
        """Forget the in-memory widget (like a page reload). Stored chats remain."""
        self._locks.pop(client_id, None)
        return self._controllers.pop(client_id, None) is not None

    def clear(self) -> None:
        self._controllers.clear()
        self._locks.clear()


widget_service = WidgetService()
