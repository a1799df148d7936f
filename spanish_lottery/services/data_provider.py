"""Historical data provider — cached scraped draws with static fallbacks."""

import asyncio
import time
from collections.abc import Awaitable, Callable

from loguru import logger

from spanish_lottery.config import settings
from spanish_lottery.schemas.lottery import HistoricalDraw
from spanish_lottery.schemas.statistics import CacheStatus, GameCacheInfo
from spanish_lottery.scraper.results_scraper import scrape_lottery_results

Fetcher = Callable[[str], Awaitable[list[HistoricalDraw]]]

GAME_IDS = ("primitiva", "bonoloto", "euromillones", "gordo", "eurodreams")

# Newest first, used when scraping fails or returns nothing
FALLBACK_DRAWS: dict[str, list[HistoricalDraw]] = {
    "primitiva": [
        HistoricalDraw(numbers=[2, 3, 11, 13, 20, 48], extra=[4], date="2024-02-24"),
        HistoricalDraw(numbers=[2, 11, 20, 27, 37, 44], extra=[3], date="2024-02-22"),
    ],
    "bonoloto": [
        HistoricalDraw(numbers=[6, 11, 15, 25, 35, 49], date="2024-02-26"),
        HistoricalDraw(numbers=[1, 6, 11, 23, 41, 45], date="2024-02-24"),
    ],
    "euromillones": [
        HistoricalDraw(numbers=[4, 6, 20, 24, 25], stars=[5, 9], date="2024-02-23"),
        HistoricalDraw(numbers=[8, 19, 32, 41, 42], stars=[9, 11], date="2024-02-20"),
    ],
    "gordo": [
        HistoricalDraw(numbers=[2, 11, 26, 27, 53], extra=[7], date="2024-02-25"),
        HistoricalDraw(numbers=[5, 7, 14, 26, 27], extra=[1], date="2024-02-18"),
    ],
    "eurodreams": [
        HistoricalDraw(numbers=[3, 12, 16, 24, 31, 36], extra=[2], date="2024-02-26"),
        HistoricalDraw(numbers=[2, 7, 11, 19, 29, 35], extra=[5], date="2024-02-22"),
    ],
}


def get_fallback_data(game_type: str) -> list[HistoricalDraw]:
    return list(FALLBACK_DRAWS.get(game_type, []))


class HistoricalDataProvider:
    """Holds historical draws for every game.

    The first request loads all games concurrently; later requests return the
    same snapshot until the TTL expires or ``invalidate()`` is called. A game
    whose fetch fails or comes back empty gets its fallback draws instead,
    without affecting the other games.

    Build one per application and pass it to consumers.
    """

    def __init__(
        self,
        fetcher: Fetcher = scrape_lottery_results,
        ttl_seconds: int | None = None,
        game_ids: tuple[str, ...] = GAME_IDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._fetcher = fetcher
        self._clock = clock
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.CACHE_TTL_SECONDS
        self.game_ids = game_ids
        self._data: dict[str, list[HistoricalDraw]] | None = None
        self._sources: dict[str, str] = {}
        self._loaded_at: float | None = None
        self._lock = asyncio.Lock()

    def _is_fresh(self) -> bool:
        if self._data is None or self._loaded_at is None:
            return False
        if self.ttl_seconds <= 0:
            return True  # no expiry, manual invalidation only
        return self._clock() - self._loaded_at < self.ttl_seconds

    async def _load_game(self, game_type: str) -> tuple[list[HistoricalDraw], str]:
        try:
            draws = await self._fetcher(game_type)
        except Exception as e:
            logger.error("Error getting data for {}: {}", game_type, e)
            return get_fallback_data(game_type), "fallback"

        if not draws:
            logger.warning("No scraped data for {}, using fallback draws", game_type)
            return get_fallback_data(game_type), "fallback"
        return list(draws), "scraped"

    async def _load_all(self) -> None:
        results = await asyncio.gather(*(self._load_game(g) for g in self.game_ids))

        data, sources = {}, {}
        for game_type, (draws, source) in zip(self.game_ids, results):
            data[game_type] = draws
            sources[game_type] = source

        self._data = data
        self._sources = sources
        self._loaded_at = self._clock()
        logger.info(
            "Historical data loaded: {}",
            ", ".join(f"{g}={len(d)} ({sources[g]})" for g, d in data.items()),
        )

    async def _snapshot(self) -> dict[str, list[HistoricalDraw]]:
        if not self._is_fresh():
            async with self._lock:
                if not self._is_fresh():
                    await self._load_all()
        return self._data

    async def get_historical_data(self) -> dict[str, list[HistoricalDraw]]:
        """Draws for every game, loading them if the cache is cold or stale.

        Returns copies; edits by the caller never reach the cache.
        """
        data = await self._snapshot()
        return {game_type: list(draws) for game_type, draws in data.items()}

    async def get_historical_draws(self, game_type: str) -> list[HistoricalDraw]:
        """Draws for one game, newest first. Unknown games yield ``[]``."""
        data = await self._snapshot()
        return list(data.get(game_type, []))

    def invalidate(self) -> None:
        """Drop the cached snapshot; the next request reloads."""
        self._data = None
        self._sources = {}
        self._loaded_at = None
        logger.info("Historical data cache invalidated")

    async def refresh(self) -> dict[str, list[HistoricalDraw]]:
        self.invalidate()
        return await self.get_historical_data()

    def cache_info(self) -> CacheStatus:
        loaded = self._data is not None
        age = self._clock() - self._loaded_at if self._loaded_at is not None else None
        games = {
            g: GameCacheInfo(source=self._sources[g], draws=len(draws))
            for g, draws in (self._data or {}).items()
        }
        return CacheStatus(
            loaded=loaded,
            age_seconds=round(age, 1) if age is not None else None,
            ttl_seconds=self.ttl_seconds,
            games=games,
        )
