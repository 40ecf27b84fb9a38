"""Sidebar view - lists chat sessions and switches between them."""

from gamehelp.core.registry import ChatSessionRegistry
from gamehelp.core.renderer import ChatRenderer
from gamehelp.schemas.chat import SidebarEntry


class SidebarView:
    def __init__(self, registry: ChatSessionRegistry, renderer: ChatRenderer):
        self.registry = registry
        self.renderer = renderer
        self.entries: list[SidebarEntry] = []

    def render(self) -> list[SidebarEntry]:
        """Rebuild one entry per session, marking the active one."""
        active_id = self.registry.active_id
        self.entries = [
            SidebarEntry(id=s.id, title=s.title, active=s.id == active_id)
            for s in self.registry.list_sessions()
        ]
        return self.entries

    async def select(self, session_id: str) -> bool:
        """Switch to a session and redraw its full history.

        Clicking the entry that is already active does nothing and returns False.
        """
        if session_id == self.registry.active_id:
            return False
        session = await self.registry.set_active(session_id)
        self.renderer.redraw(session.messages if session else [])
        self.render()
        return True
