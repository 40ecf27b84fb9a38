"""Chat session registry - owns all chat sessions and the active pointer.

Every mutation writes the full state back to the persistent store.
"""

import time
import uuid

from loguru import logger
from pydantic import ValidationError

from gamehelp.config import settings
from gamehelp.core.store import PersistentStore
from gamehelp.schemas.chat import ChatSession, Message, RegistryState, Role

SESSIONS_KEY = "sessions"
ACTIVE_KEY = "active"


def new_session_id() -> str:
    """Millisecond creation timestamp plus a random suffix, unique per call."""
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"


def welcome_message() -> Message:
    return Message(role=Role.BOT, text=settings.WELCOME_MESSAGE)


class ChatSessionRegistry:
    def __init__(self, store: PersistentStore, state: RegistryState | None = None):
        self.store = store
        self.state = state or RegistryState()

    @classmethod
    async def load(cls, store: PersistentStore) -> "ChatSessionRegistry":
        """Load registry state; corrupt or missing data yields an empty registry."""
        state = RegistryState()

        raw_sessions = await store.load(SESSIONS_KEY)
        if raw_sessions is not None:
            try:
                state.sessions = RegistryState(sessions=raw_sessions).sessions
            except ValidationError:
                logger.warning(f"Discarding unreadable chat sessions in {store.namespace}")

        active_id = await store.load(ACTIVE_KEY)
        if isinstance(active_id, str) and active_id in state.sessions:
            state.active_id = active_id
        elif active_id is not None:
            logger.warning(f"Active chat {active_id!r} not found, starting without one")

        return cls(store, state)

    async def persist(self) -> None:
        """Write the full registry state (sessions blob + active id)."""
        await self.store.save(
            SESSIONS_KEY,
            {sid: s.model_dump(mode="json") for sid, s in self.state.sessions.items()},
        )
        if self.state.active_id is None:
            await self.store.delete(ACTIVE_KEY)
        else:
            await self.store.save(ACTIVE_KEY, self.state.active_id)

    async def create_session(self, first_message_text: str) -> ChatSession:
        """Create a session titled after the first message, seeded with the welcome."""
        session = ChatSession(
            id=new_session_id(),
            title=first_message_text[: settings.SESSION_TITLE_LENGTH],
            messages=[welcome_message()],
        )
        self.state.sessions[session.id] = session
        await self.persist()
        logger.info(f"Created chat {session.id} ({session.title!r})")
        return session

    async def append_message(self, session_id: str, message: Message) -> bool:
        """Append to a session. Unknown ids are a no-op and return False."""
        session = self.get(session_id)
        if session is None:
            logger.warning(f"Dropping message for unknown chat {session_id!r}")
            return False
        session.messages.append(message)
        await self.persist()
        return True

    async def set_active(self, session_id: str) -> ChatSession | None:
        """Make a session active. An unknown id clears the active pointer."""
        session = self.get(session_id)
        self.state.active_id = session.id if session else None
        if session is None:
            logger.warning(f"Cannot activate unknown chat {session_id!r}")
        await self.persist()
        return session

    async def clear_active(self) -> None:
        """Forget the active session so the next submit starts a new one."""
        self.state.active_id = None
        await self.persist()

    def get(self, session_id: str) -> ChatSession | None:
        return self.state.sessions.get(session_id)

    def get_active(self) -> ChatSession | None:
        if self.state.active_id is None:
            return None
        return self.state.sessions.get(self.state.active_id)

    @property
    def active_id(self) -> str | None:
        return self.state.active_id

    def list_sessions(self) -> list[ChatSession]:
        """All sessions in creation order."""
        return list(self.state.sessions.values())
