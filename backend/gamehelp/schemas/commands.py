"""Typed UI commands dispatched to the chat controller.

Each browser event (form submit, sidebar click, carousel button) maps to one
of these. The ``type`` field discriminates them in request bodies, e.g.
``{"type": "submit", "text": "Where is the first bonfire?"}``.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, RootModel


class Submit(BaseModel):
    type: Literal["submit"] = "submit"
    text: str


class SelectSession(BaseModel):
    type: Literal["select_session"] = "select_session"
    session_id: str


class NewSession(BaseModel):
    type: Literal["new_session"] = "new_session"


class CarouselNext(BaseModel):
    type: Literal["carousel_next"] = "carousel_next"


class CarouselPrevious(BaseModel):
    type: Literal["carousel_previous"] = "carousel_previous"


class CarouselSelect(BaseModel):
    type: Literal["carousel_select"] = "carousel_select"
    index: int


Command = Annotated[
    Union[Submit, SelectSession, NewSession, CarouselNext, CarouselPrevious, CarouselSelect],
    Field(discriminator="type"),
]


class CommandRequest(RootModel[Command]):
    """Request body wrapping one command of any type."""
