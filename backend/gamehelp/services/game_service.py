"""Game service - loads the carousel's game cards from YAML."""

from pathlib import Path

import yaml

from gamehelp.schemas.game import GameCard

DATA_DIR = Path(__file__).parent.parent / "data"
GAMES_FILE = DATA_DIR / "games.yaml"


class GameService:
    def __init__(self, path: Path = GAMES_FILE):
        self.path = path
        self._cache: list[GameCard] | None = None

    def list_cards(self) -> list[GameCard]:
        """Cards in carousel order. Loaded once and cached."""
        if self._cache is not None:
            return self._cache

        if not self.path.exists():
            raise FileNotFoundError(f"Game catalog not found: {self.path}")

        with open(self.path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        self._cache = [GameCard(**card) for card in raw.get("games", [])]
        return self._cache


game_service = GameService()
