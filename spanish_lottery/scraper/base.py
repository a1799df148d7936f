"""Base results-page parser."""

from abc import ABC, abstractmethod

from bs4 import BeautifulSoup, Tag
from loguru import logger

from spanish_lottery.schemas.lottery import HistoricalDraw

DRAW_SELECTOR = ".resultado-sorteo"
DATE_SELECTOR = ".fecha-sorteo"
NUMBERS_SELECTOR = ".numeros-combinacion .numero"


def read_numbers(element: Tag, selector: str) -> list[int]:
    """Integers found under ``selector``. Raises ValueError on non-numeric text."""
    return [int(node.get_text(strip=True)) for node in element.select(selector)]


class BaseResultsParser(ABC):
    """Turns one game's results page into historical draws.

    Each draw on the page is a ``.resultado-sorteo`` block. Subclasses read
    the game-specific parts of a block in ``parse_draw``.
    """

    game_type: str = ""
    main_count: int = 0

    def parse(self, html: str) -> list[HistoricalDraw]:
        soup = BeautifulSoup(html, "html.parser")
        draws = []
        for element in soup.select(DRAW_SELECTOR):
            try:
                draw = self.parse_draw(element)
            except ValueError as e:
                logger.warning("[{}] Failed to parse draw: {}", self.game_type, e)
                continue
            if draw is not None:
                draws.append(draw)

        logger.debug("[{}] Parsed {} draws", self.game_type, len(draws))
        return draws

    def read_date(self, element: Tag) -> str:
        node = element.select_one(DATE_SELECTOR)
        return node.get_text(strip=True) if node else ""

    def read_main_numbers(self, element: Tag) -> list[int] | None:
        """Main numbers of a block, or None when the count is wrong."""
        numbers = read_numbers(element, NUMBERS_SELECTOR)
        if len(numbers) != self.main_count:
            logger.warning(
                "[{}] Skipping draw with {} numbers (expected {})",
                self.game_type, len(numbers), self.main_count,
            )
            return None
        return numbers

    @abstractmethod
    def parse_draw(self, element: Tag) -> HistoricalDraw | None:
        """Parse a single draw block. Return None to skip it."""
        ...


def is_complete_draw(draw: HistoricalDraw) -> bool:
    """The draw has a date and at least one main number."""
    return bool(draw.date and draw.numbers)
