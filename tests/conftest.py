import asyncio
import os
import random
import tempfile

import pytest

# Must be set before spanish_lottery.config is imported
os.environ.setdefault("SCHEDULER_ENABLED", "false")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "spanish_lottery_tests.log"))

from spanish_lottery.schemas.lottery import HistoricalDraw  # noqa: E402
from spanish_lottery.services.data_provider import (  # noqa: E402
    FALLBACK_DRAWS,
    HistoricalDataProvider,
)


def make_fetcher(data=None, failing=(), calls=None):
    """Build a stub fetcher: returns ``data[game]``, raises for ``failing``."""
    data = data or {}

    async def fetcher(game_type):
        if calls is not None:
            calls.append(game_type)
        if game_type in failing:
            raise RuntimeError(f"boom {game_type}")
        return data.get(game_type, [])

    return fetcher


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fallback_provider():
    """Provider whose fetcher never finds anything, so all games use fallbacks."""
    return HistoricalDataProvider(fetcher=make_fetcher(), ttl_seconds=0)


@pytest.fixture
def primitiva_draws():
    return list(FALLBACK_DRAWS["primitiva"])


@pytest.fixture
def scraped_primitiva():
    return [
        HistoricalDraw(numbers=[1, 9, 17, 33, 40, 45], extra=[2], date="2024-03-02"),
        HistoricalDraw(numbers=[9, 14, 21, 30, 38, 46], extra=[7], date="2024-02-29"),
    ]


def run(coro):
    return asyncio.run(coro)
