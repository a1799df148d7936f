"""Generator service — builds complete tickets for a game."""

import random

from loguru import logger

from spanish_lottery.analysis.generator import (
    generate_bonus_numbers,
    generate_optimized_numbers,
)
from spanish_lottery.analysis.patterns import analyze_pattern
from spanish_lottery.analysis.validator import validate_numbers
from spanish_lottery.config import settings
from spanish_lottery.schemas.analysis import (
    GenerateResponse,
    NumberPattern,
    ValidationResult,
)
from spanish_lottery.services.data_provider import HistoricalDataProvider
from spanish_lottery.services.lottery_service import get_game
from spanish_lottery.services.statistics_service import get_historical_patterns

EXHAUSTED_MESSAGE = (
    "No se encontró una combinación con un patrón similar al histórico. "
    "Por favor, intenta de nuevo."
)


async def generate_ticket(
    provider: HistoricalDataProvider,
    game_type: str,
    rng: random.Random | None = None,
) -> GenerateResponse:
    """Generate main numbers plus the game's extra or star numbers.

    An exhausted search is reported with ``status="exhausted"`` and no
    numbers, so the client can offer a retry instead of an error list.
    """
    game = get_game(game_type)
    rng = rng or random.Random()

    draws = await provider.get_historical_draws(game_type)
    patterns = get_historical_patterns(draws)

    numbers = generate_optimized_numbers(
        game.ticket_config(),
        patterns,
        max_attempts=settings.GENERATOR_MAX_ATTEMPTS,
        rng=rng,
    )

    if not numbers:
        logger.info("[{}] Generation exhausted", game_type)
        return GenerateResponse(
            game_type=game_type,
            status="exhausted",
            numbers=[],
            historical_patterns=len(patterns),
            message=EXHAUSTED_MESSAGE,
        )

    validation = validate_numbers(numbers, game.basic_config())
    if not validation.is_valid:
        # the generator only returns tickets valid under the stricter config
        raise RuntimeError(f"Generated invalid ticket {numbers}: {validation.errors}")

    stars = sorted(generate_bonus_numbers(game.stars, rng)) if game.stars else []
    extra = generate_bonus_numbers(game.extra, rng) if game.extra else []

    return GenerateResponse(
        game_type=game_type,
        status="ok",
        numbers=numbers,
        stars=stars,
        extra=extra,
        extra_name=game.extra.name if game.extra else None,
        pattern=analyze_pattern(numbers),
        historical_patterns=len(patterns),
    )


def validate_ticket(
    game_type: str, numbers: list[int], strict: bool = False
) -> ValidationResult:
    """Validate a user ticket against the game's range and count.

    With ``strict`` the generator's sum and consecutive bounds apply too.
    """
    game = get_game(game_type)
    config = game.ticket_config() if strict else game.basic_config()
    return validate_numbers(numbers, config)


def analyze_ticket(numbers: list[int]) -> NumberPattern:
    return analyze_pattern(numbers)
