"""Game catalogue API endpoints."""

from fastapi import APIRouter

from spanish_lottery.schemas.lottery import LotteryGame
from spanish_lottery.services.lottery_service import get_game, list_games
from spanish_lottery.api.deps import validate_game

router = APIRouter()


@router.get("", response_model=list[LotteryGame])
async def games():
    """Loterías disponibles y su configuración."""
    return list_games()


@router.get("/{game}", response_model=LotteryGame)
async def game_detail(game: str):
    """Configuración de una lotería."""
    validate_game(game)
    return get_game(game)
