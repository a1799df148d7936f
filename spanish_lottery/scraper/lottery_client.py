"""HTTP client for the loteriasyapuestas.es results pages."""

import aiohttp
from loguru import logger

from spanish_lottery.config import settings
from spanish_lottery.exceptions import DataUnavailableError

LOTTERY_URLS = {
    "primitiva": f"{settings.RESULTS_BASE_URL}/la-primitiva/",
    "bonoloto": f"{settings.RESULTS_BASE_URL}/bonoloto/",
    "euromillones": f"{settings.RESULTS_BASE_URL}/euromillones/",
    "gordo": f"{settings.RESULTS_BASE_URL}/gordo-primitiva/",
    "eurodreams": f"{settings.RESULTS_BASE_URL}/eurodreams/",
}

HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    "Accept": "text/html,application/xhtml+xml",
    "Accept-Language": "es-ES,es;q=0.9",
}


class LotteryClient:
    """Fetches raw results HTML for a game."""

    def __init__(self, timeout: float | None = None):
        self.timeout = aiohttp.ClientTimeout(
            total=timeout if timeout is not None else settings.HTTP_TIMEOUT_SECONDS
        )

    async def fetch_html(self, game_id: str) -> str:
        url = LOTTERY_URLS.get(game_id)
        if url is None:
            raise ValueError(f"Unknown game type: {game_id}. Valid: {set(LOTTERY_URLS)}")

        logger.debug("Fetching {} results from {}", game_id, url)
        async with aiohttp.ClientSession(headers=HEADERS, timeout=self.timeout) as client:
            async with client.get(url) as resp:
                if resp.status != 200:
                    raise DataUnavailableError(game_id, f"HTTP {resp.status} from {url}")
                return await resp.text()


# Singleton
lottery_client = LotteryClient()
