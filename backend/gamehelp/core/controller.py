"""Chat controller - orchestrates sessions, carousel context and replies.

UI events arrive as typed commands (see ``gamehelp.schemas.commands``) so the
controller can be driven by the HTTP API, the terminal client or tests alike.
"""

from collections.abc import Awaitable, Callable

from loguru import logger

from gamehelp.config import settings
from gamehelp.core.carousel import Carousel
from gamehelp.core.errors import ChatBusyError
from gamehelp.core.registry import ChatSessionRegistry
from gamehelp.core.renderer import ChatRenderer
from gamehelp.core.sidebar import SidebarView
from gamehelp.schemas.chat import Message, Role, WidgetState
from gamehelp.schemas.commands import (
    CarouselNext,
    CarouselPrevious,
    CarouselSelect,
    Command,
    NewSession,
    SelectSession,
    Submit,
)

# (message, game context) -> assistant reply text
SendFn = Callable[[str, str], Awaitable[str]]


class ChatController:
    def __init__(
        self,
        registry: ChatSessionRegistry,
        carousel: Carousel,
        renderer: ChatRenderer,
        sidebar: SidebarView,
        send: SendFn,
    ):
        self.registry = registry
        self.carousel = carousel
        self.renderer = renderer
        self.sidebar = sidebar
        self.send = send
        self.pending = False

    def restore(self) -> None:
        """Initial draw: the active session's history (or a greeting) and the sidebar."""
        session = self.registry.get_active()
        if session is not None:
            self.renderer.redraw(session.messages)
        else:
            self._greet()
        self.sidebar.render()

    def _greet(self) -> None:
        self.renderer.log.clear()
        self.renderer.render(settings.WELCOME_MESSAGE, Role.BOT)

    async def _append(self, session_id: str, role: Role, text: str) -> None:
        message = Message(role=role, text=text)
        if await self.registry.append_message(session_id, message):
            self.renderer.render(message.text, message.role)

    async def submit(self, text: str) -> bool:
        """Send a user message and append the assistant's reply.

        Returns False for blank input. Relay failures never escape: they turn
        into the fallback bot message.
        """
        text = text.strip()
        if not text:
            return False
        if self.pending:
            logger.warning("Rejecting message while a reply is still pending")
            raise ChatBusyError("Wait for the current reply before sending another message")

        # Held from the first write to the last so overlapping submits are rejected
        self.pending = True
        try:
            session = self.registry.get_active()
            if session is None:
                session = await self.registry.create_session(text)
                await self.registry.set_active(session.id)
                self.renderer.redraw(session.messages)
                self.sidebar.render()

            await self._append(session.id, Role.USER, text)

            try:
                reply = await self.send(text, self.carousel.context)
            except Exception:
                logger.exception(f"Error getting AI response for chat {session.id}")
                reply = settings.FALLBACK_MESSAGE

            await self._append(session.id, Role.BOT, reply)
        finally:
            self.pending = False
        return True

    async def select_session(self, session_id: str) -> bool:
        return await self.sidebar.select(session_id)

    async def new_session(self) -> None:
        """Start over: no active session until the next submit creates one."""
        await self.registry.clear_active()
        self._greet()
        self.sidebar.render()

    def next_game(self) -> bool:
        return self.carousel.next()

    def previous_game(self) -> bool:
        return self.carousel.previous()

    def select_game(self, index: int) -> None:
        self.carousel.select_index(index)

    async def dispatch(self, command: Command) -> None:
        """Route a typed UI command to its handler."""
        if isinstance(command, Submit):
            await self.submit(command.text)
        elif isinstance(command, SelectSession):
            await self.select_session(command.session_id)
        elif isinstance(command, NewSession):
            await self.new_session()
        elif isinstance(command, CarouselNext):
            self.next_game()
        elif isinstance(command, CarouselPrevious):
            self.previous_game()
        elif isinstance(command, CarouselSelect):
            self.select_game(command.index)
        else:
            raise TypeError(f"Unknown command: {command!r}")

    def view(self) -> WidgetState:
        """Snapshot of everything the page draws."""
        log = list(self.renderer.log.nodes)
        if self.pending:
            log.append(self.renderer.typing_indicator())
        return WidgetState(
            carousel=self.carousel.state(),
            sessions=self.sidebar.entries,
            active_session_id=self.registry.active_id,
            log=log,
            scroll_top=self.renderer.log.scroll_top,
            pending=self.pending,
        )
