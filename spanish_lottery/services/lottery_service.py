"""Lottery service — game catalogue and historical draw retrieval."""

from spanish_lottery.schemas.lottery import BonusSpec, HistoricalDraw, LotteryGame
from spanish_lottery.services.data_provider import HistoricalDataProvider

GAMES: dict[str, LotteryGame] = {
    "primitiva": LotteryGame(
        game_id="primitiva",
        name="La Primitiva",
        numbers=6,
        max_number=49,
        extra=BonusSpec(name="Reintegro", count=1, max_number=9),
    ),
    "bonoloto": LotteryGame(
        game_id="bonoloto",
        name="Bonoloto",
        numbers=6,
        max_number=49,
    ),
    "euromillones": LotteryGame(
        game_id="euromillones",
        name="Euromillones",
        numbers=5,
        max_number=50,
        stars=BonusSpec(name="Estrellas", count=2, max_number=12),
    ),
    "gordo": LotteryGame(
        game_id="gordo",
        name="El Gordo",
        numbers=5,
        max_number=54,
        extra=BonusSpec(name="Número Clave", count=1, max_number=9),
    ),
    "eurodreams": LotteryGame(
        game_id="eurodreams",
        name="Euro Dreams",
        numbers=6,
        max_number=40,
        extra=BonusSpec(name="Sueño", count=1, max_number=5),
    ),
}

VALID_GAMES = set(GAMES.keys())


def get_game(game_type: str) -> LotteryGame:
    """Get the game definition for a game type."""
    if game_type not in GAMES:
        raise ValueError(f"Unknown game type: {game_type}. Valid: {VALID_GAMES}")
    return GAMES[game_type]


def list_games() -> list[LotteryGame]:
    return list(GAMES.values())


async def get_draws(
    provider: HistoricalDataProvider, game_type: str, limit: int | None = None
) -> list[HistoricalDraw]:
    get_game(game_type)
    draws = await provider.get_historical_draws(game_type)
    return draws[:limit] if limit else draws
