"""Statistics API endpoints."""

from fastapi import APIRouter, Depends, Query

from spanish_lottery.api.deps import get_provider, validate_game
from spanish_lottery.schemas.lottery import HistoricalDraw
from spanish_lottery.schemas.statistics import FrequencyRecord, GamePatterns
from spanish_lottery.services import lottery_service
from spanish_lottery.services import statistics_service as stats
from spanish_lottery.services.data_provider import HistoricalDataProvider

router = APIRouter()


@router.get("/{game}/frequency", response_model=list[FrequencyRecord])
async def frequency(
    game: str,
    top_n: int | None = Query(None, ge=1, description="Solo los N números más frecuentes"),
    provider: HistoricalDataProvider = Depends(get_provider),
):
    """Frecuencia de aparición de cada número."""
    validate_game(game)
    max_number = lottery_service.get_game(game).max_number
    return await stats.calculate_number_frequencies(provider, game, max_number, top_n=top_n)


@router.get("/{game}/history", response_model=list[HistoricalDraw])
async def history(
    game: str,
    limit: int | None = Query(None, ge=1, le=500),
    provider: HistoricalDataProvider = Depends(get_provider),
):
    """Sorteos históricos, del más reciente al más antiguo."""
    validate_game(game)
    return await lottery_service.get_draws(provider, game, limit=limit)


@router.get("/{game}/patterns", response_model=GamePatterns)
async def patterns(
    game: str,
    provider: HistoricalDataProvider = Depends(get_provider),
):
    """Patrones estadísticos de los sorteos históricos."""
    validate_game(game)
    return await stats.get_game_patterns(provider, game)
