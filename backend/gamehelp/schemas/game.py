"""Game catalog schemas."""

from pydantic import BaseModel


class GameCard(BaseModel):
    """One selectable card in the game carousel."""
    title: str
    game: str | None = None  # context sent to the relay; None = general video games
    image: str | None = None


class GameCatalog(BaseModel):
    games: list[GameCard]
