"""Parser for La Primitiva and Bonoloto results pages."""

from bs4 import Tag

from spanish_lottery.schemas.lottery import HistoricalDraw
from spanish_lottery.scraper.base import BaseResultsParser, read_numbers

EXTRA_SELECTOR = ".complementario .numero"


class PrimitivaParser(BaseResultsParser):
    """Six main numbers plus the complementario.

    Example block::

        <div class="resultado-sorteo">
          <span class="fecha-sorteo">sábado 24 feb 2024</span>
          <div class="numeros-combinacion"><span class="numero">2</span>...</div>
          <div class="complementario"><span class="numero">4</span></div>
        </div>
    """

    game_type = "primitiva"
    main_count = 6

    def parse_draw(self, element: Tag) -> HistoricalDraw | None:
        numbers = self.read_main_numbers(element)
        if numbers is None:
            return None

        extra = read_numbers(element, EXTRA_SELECTOR)
        return HistoricalDraw(
            numbers=numbers,
            date=self.read_date(element),
            extra=extra or None,
        )


class BonolotoParser(PrimitivaParser):
    game_type = "bonoloto"
