"""Chat-related Pydantic schemas."""

from enum import Enum

from pydantic import BaseModel, Field


class Role(str, Enum):
    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    """A single chat line. Immutable once created."""
    role: Role
    text: str

    model_config = {"frozen": True}


class ChatSession(BaseModel):
    """One conversation thread; only ever grows by appending messages."""
    id: str
    title: str
    messages: list[Message] = Field(default_factory=list)


class RegistryState(BaseModel):
    sessions: dict[str, ChatSession] = Field(default_factory=dict)  # insertion ordered
    active_id: str | None = None


class RelayRequest(BaseModel):
    """Incoming relay call from the widget."""
    message: str = Field(min_length=1)
    context: str | None = None  # game name; None falls back to the default context


class RelayResponse(BaseModel):
    response: str


class RelayErrorResponse(BaseModel):
    error: str


class RenderedMessage(BaseModel):
    """A message turned into a displayable HTML node."""
    role: Role
    html: str
    css_classes: list[str]
    pending: bool = False  # True only for the transient typing indicator


class SidebarEntry(BaseModel):
    id: str
    title: str
    active: bool = False


class CarouselState(BaseModel):
    cards: list[str]  # card titles, in display order
    index: int | None
    context: str
    can_previous: bool
    can_next: bool


class WidgetState(BaseModel):
    """Everything the page needs to draw the widget."""
    carousel: CarouselState
    sessions: list[SidebarEntry]
    active_session_id: str | None
    log: list[RenderedMessage]
    scroll_top: int
    pending: bool
