"""Dependency injection for FastAPI."""

from fastapi import HTTPException, Request

from spanish_lottery.services.data_provider import HistoricalDataProvider
from spanish_lottery.services.lottery_service import VALID_GAMES


def get_provider(request: Request) -> HistoricalDataProvider:
    """The application-wide historical data provider."""
    return request.app.state.provider


def validate_game(game: str) -> str:
    if game not in VALID_GAMES:
        raise HTTPException(status_code=400, detail=f"Invalid game. Valid: {sorted(VALID_GAMES)}")
    return game
