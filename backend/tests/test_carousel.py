"""Tests for the carousel context provider."""

import pytest

from gamehelp.core.carousel import Carousel
from gamehelp.schemas.game import GameCard

CARDS = [
    GameCard(title="Dark Souls III", game="Dark Souls III"),
    GameCard(title="Elden Ring", game="Elden Ring"),
    GameCard(title="Something else"),
]


def test_starts_at_first_card():
    carousel = Carousel(CARDS)
    assert carousel.index == 0
    assert carousel.context == "Dark Souls III"
    assert carousel.can_previous is False
    assert carousel.can_next is True


def test_next_and_previous():
    carousel = Carousel(CARDS)
    assert carousel.next() is True
    assert carousel.context == "Elden Ring"
    assert carousel.previous() is True
    assert carousel.context == "Dark Souls III"


def test_next_at_last_card_is_noop():
    carousel = Carousel(CARDS)
    carousel.select_index(len(CARDS) - 1)
    context = carousel.context

    assert carousel.next() is False
    assert carousel.index == len(CARDS) - 1
    assert carousel.context == context


def test_previous_at_first_card_is_noop():
    carousel = Carousel(CARDS)
    assert carousel.previous() is False
    assert carousel.index == 0
    assert carousel.context == "Dark Souls III"


def test_card_without_game_uses_default_context():
    carousel = Carousel(CARDS, default_context="a video game")
    carousel.select_index(2)
    assert carousel.context == "a video game"


def test_select_index_out_of_range():
    carousel = Carousel(CARDS)
    with pytest.raises(IndexError):
        carousel.select_index(3)
    with pytest.raises(IndexError):
        carousel.select_index(-1)
    assert carousel.index == 0


def test_no_cards_means_no_selection():
    carousel = Carousel([], default_context="a video game")
    assert carousel.is_selected is False
    assert carousel.context == "a video game"
    assert carousel.next() is False
    assert carousel.previous() is False


def test_state_snapshot():
    carousel = Carousel([GameCard(title="Hades", game="Hades")])
    state = carousel.state()
    assert state.cards == ["Hades"]
    assert state.index == 0
    assert state.context == "Hades"
    assert state.can_next is False
