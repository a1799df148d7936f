"""Placeholder parser for games whose results markup is not handled yet."""

from bs4 import Tag
from loguru import logger

from spanish_lottery.schemas.lottery import HistoricalDraw
from spanish_lottery.scraper.base import BaseResultsParser


class UnsupportedParser(BaseResultsParser):
    """Always yields no draws, so the data provider uses fallback data."""

    def __init__(self, game_type: str):
        self.game_type = game_type

    def parse(self, html: str) -> list[HistoricalDraw]:
        logger.info("[{}] No results parser available, skipping", self.game_type)
        return []

    def parse_draw(self, element: Tag) -> HistoricalDraw | None:
        return None
