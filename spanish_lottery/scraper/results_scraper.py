"""Fetch and parse historical results for a game."""

from loguru import logger

from spanish_lottery.schemas.lottery import HistoricalDraw
from spanish_lottery.scraper.base import BaseResultsParser, is_complete_draw
from spanish_lottery.scraper.lottery_client import LotteryClient, lottery_client
from spanish_lottery.scraper.parsers.euromillones_parser import EuromillonesParser
from spanish_lottery.scraper.parsers.primitiva_parser import BonolotoParser, PrimitivaParser
from spanish_lottery.scraper.parsers.unsupported_parser import UnsupportedParser

GAME_PARSERS: dict[str, BaseResultsParser] = {
    "primitiva": PrimitivaParser(),
    "bonoloto": BonolotoParser(),
    "euromillones": EuromillonesParser(),
    # No parser for these result pages yet; they are served from fallback draws
    "gordo": UnsupportedParser("gordo"),
    "eurodreams": UnsupportedParser("eurodreams"),
}


def get_parser(game_type: str) -> BaseResultsParser:
    """Get the results parser for a game type."""
    if game_type not in GAME_PARSERS:
        raise ValueError(f"Unknown game type: {game_type}. Valid: {set(GAME_PARSERS)}")
    return GAME_PARSERS[game_type]


async def scrape_lottery_results(
    game_type: str, client: LotteryClient | None = None
) -> list[HistoricalDraw]:
    """Scrape the latest draws of a game, newest first.

    Never raises: any fetch or parse failure is logged and yields ``[]``.
    """
    client = client or lottery_client
    try:
        parser = get_parser(game_type)
        html = await client.fetch_html(game_type)
        draws = parser.parse(html)
    except Exception as e:
        logger.error("[{}] Scrape failed: {}", game_type, e)
        return []

    complete = [draw for draw in draws if is_complete_draw(draw)]
    if len(complete) < len(draws):
        logger.warning(
            "[{}] Dropped {} incomplete draws", game_type, len(draws) - len(complete),
        )

    logger.info("[{}] Scraped {} draws", game_type, len(complete))
    return complete
