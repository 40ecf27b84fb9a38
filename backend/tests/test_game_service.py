"""Tests for the game service - loading carousel cards from YAML."""

import pytest

from gamehelp.services.game_service import GameService, game_service


def test_list_cards():
    cards = game_service.list_cards()
    assert len(cards) >= 2
    assert cards[0].title == "Dark Souls III"
    assert cards[0].game == "Dark Souls III"


def test_general_card_has_no_game():
    assert any(card.game is None for card in game_service.list_cards())


def test_cards_cached():
    service = GameService()
    assert service.list_cards() is service.list_cards()


def test_missing_catalog(tmp_path):
    with pytest.raises(FileNotFoundError):
        GameService(tmp_path / "games.yaml").list_cards()


def test_custom_catalog(tmp_path):
    path = tmp_path / "games.yaml"
    path.write_text("games:\n  - title: Hades\n    game: Hades\n  - title: Other\n", encoding="utf-8")
    cards = GameService(path).list_cards()
    assert [c.title for c in cards] == ["Hades", "Other"]
    assert cards[1].game is None
