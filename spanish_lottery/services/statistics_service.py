"""Statistics service — number frequencies and historical fingerprints."""

from collections import Counter

from spanish_lottery.analysis.patterns import analyze_pattern
from spanish_lottery.schemas.analysis import NumberPattern
from spanish_lottery.schemas.lottery import HistoricalDraw
from spanish_lottery.schemas.statistics import FrequencyRecord, GamePatterns
from spanish_lottery.services.data_provider import HistoricalDataProvider
from spanish_lottery.services.lottery_service import get_game


def tally_frequencies(
    draws: list[HistoricalDraw], max_number: int
) -> list[FrequencyRecord]:
    """Count appearances of each number 1..max_number across draws.

    Draws are expected newest first, so the first date seen for a number is
    its most recent one. Numbers outside the range are ignored. The result is
    sorted by descending frequency; ties keep ascending number order.
    """
    counter = Counter()
    last_drawn: dict[int, str | None] = {}

    for draw in draws:
        for num in draw.numbers:
            if not 1 <= num <= max_number:
                continue
            counter[num] += 1
            last_drawn.setdefault(num, draw.date)

    result = [
        FrequencyRecord(
            number=num,
            frequency=counter.get(num, 0),
            last_drawn=last_drawn.get(num),
        )
        for num in range(1, max_number + 1)
    ]

    return sorted(result, key=lambda x: x.frequency, reverse=True)


async def calculate_number_frequencies(
    provider: HistoricalDataProvider,
    game_type: str,
    max_number: int,
    top_n: int | None = None,
) -> list[FrequencyRecord]:
    """Frequency records built fresh from the provider's draws."""
    draws = await provider.get_historical_draws(game_type)
    result = tally_frequencies(draws, max_number)
    return result[:top_n] if top_n else result


def get_historical_patterns(draws: list[HistoricalDraw]) -> list[NumberPattern]:
    """Fingerprint every draw that has main numbers."""
    return [analyze_pattern(d.numbers) for d in draws if d.numbers]


async def get_game_patterns(
    provider: HistoricalDataProvider, game_type: str
) -> GamePatterns:
    get_game(game_type)
    draws = await provider.get_historical_draws(game_type)
    patterns = get_historical_patterns(draws)
    return GamePatterns(
        game_type=game_type,
        total_draws=len(draws),
        patterns=patterns,
    )
