"""Parser for Euromillones results pages."""

from bs4 import Tag
from loguru import logger

from spanish_lottery.schemas.lottery import HistoricalDraw
from spanish_lottery.scraper.base import BaseResultsParser, read_numbers

STARS_SELECTOR = ".estrellas .numero"
STAR_COUNT = 2


class EuromillonesParser(BaseResultsParser):
    """Five main numbers plus two stars."""

    game_type = "euromillones"
    main_count = 5

    def parse_draw(self, element: Tag) -> HistoricalDraw | None:
        numbers = self.read_main_numbers(element)
        if numbers is None:
            return None

        stars = read_numbers(element, STARS_SELECTOR)
        if len(stars) != STAR_COUNT:
            logger.warning(
                "[{}] Skipping draw with {} stars (expected {})",
                self.game_type, len(stars), STAR_COUNT,
            )
            return None

        return HistoricalDraw(
            numbers=numbers,
            date=self.read_date(element),
            stars=stars,
        )
