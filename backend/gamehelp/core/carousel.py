"""Carousel context provider - tracks the selected game card.

The selected card's ``game`` attribute is the context every outgoing chat
request is scoped to. State is never persisted; a fresh carousel starts at
the first card.
"""

from loguru import logger

from gamehelp.config import settings
from gamehelp.schemas.chat import CarouselState
from gamehelp.schemas.game import GameCard


class Carousel:
    def __init__(self, cards: list[GameCard], default_context: str | None = None):
        self.cards = list(cards)
        self.default_context = default_context or settings.DEFAULT_GAME_CONTEXT
        self.index: int | None = 0 if self.cards else None
        self.context = self._context_for(self.index)

    def _context_for(self, index: int | None) -> str:
        if index is None:
            return self.default_context
        return self.cards[index].game or self.default_context

    def _move_to(self, index: int) -> None:
        self.index = index
        self.context = self._context_for(index)
        logger.debug(f"Chat context set to: {self.context}")

    @property
    def is_selected(self) -> bool:
        return self.index is not None

    @property
    def can_previous(self) -> bool:
        return self.index is not None and self.index > 0

    @property
    def can_next(self) -> bool:
        return self.index is not None and self.index < len(self.cards) - 1

    def next(self) -> bool:
        """Advance one card. No-op (False) on the last card."""
        if not self.can_next:
            return False
        self._move_to(self.index + 1)
        return True

    def previous(self) -> bool:
        """Go back one card. No-op (False) on the first card."""
        if not self.can_previous:
            return False
        self._move_to(self.index - 1)
        return True

    def select_index(self, index: int) -> None:
        """Jump straight to a card, e.g. when it is clicked."""
        if not 0 <= index < len(self.cards):
            raise IndexError(f"No game card at index {index}")
        self._move_to(index)

    def state(self) -> CarouselState:
        return CarouselState(
            cards=[card.title for card in self.cards],
            index=self.index,
            context=self.context,
            can_previous=self.can_previous,
            can_next=self.can_next,
        )
