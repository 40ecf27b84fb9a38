"""Game catalog endpoint - the cards shown in the carousel."""

from fastapi import APIRouter

from gamehelp.schemas.game import GameCatalog
from gamehelp.services.game_service import game_service

router = APIRouter()


@router.get("/", response_model=GameCatalog)
async def list_games():
    return GameCatalog(games=game_service.list_cards())
