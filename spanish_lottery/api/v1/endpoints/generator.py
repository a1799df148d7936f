"""Ticket generation, validation and pattern analysis endpoints."""

from fastapi import APIRouter, Depends

from spanish_lottery.api.deps import get_provider, validate_game
from spanish_lottery.schemas.analysis import (
    GenerateResponse,
    NumberPattern,
    NumbersRequest,
    ValidateRequest,
    ValidationResult,
)
from spanish_lottery.services import generator_service as generator
from spanish_lottery.services.data_provider import HistoricalDataProvider

router = APIRouter()


@router.post("/analyze", response_model=NumberPattern)
async def analyze(request: NumbersRequest):
    """Patrón estadístico de una combinación (pares, primos, suma...)."""
    return generator.analyze_ticket(request.numbers)


@router.post("/{game}", response_model=GenerateResponse)
async def generate(
    game: str,
    provider: HistoricalDataProvider = Depends(get_provider),
):
    """Genera una combinación con un patrón similar a los sorteos históricos."""
    validate_game(game)
    return await generator.generate_ticket(provider, game)


@router.post("/{game}/validate", response_model=ValidationResult)
async def validate(game: str, request: ValidateRequest):
    """Valida una combinación introducida por el usuario."""
    validate_game(game)
    return generator.validate_ticket(game, request.numbers, strict=request.strict)
