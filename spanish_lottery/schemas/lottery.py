"""Pydantic schemas for lottery games and historical draws."""

from pydantic import BaseModel

from spanish_lottery.schemas.analysis import GameConfig


class BonusSpec(BaseModel):
    """Secondary number group drawn alongside the main numbers."""

    model_config = {"frozen": True}

    name: str
    count: int
    max_number: int


class LotteryGame(BaseModel):
    model_config = {"frozen": True}

    game_id: str
    name: str
    numbers: int
    max_number: int
    extra: BonusSpec | None = None
    stars: BonusSpec | None = None

    def basic_config(self) -> GameConfig:
        """Range and count only."""
        return GameConfig(
            min_number=1,
            max_number=self.max_number,
            required_count=self.numbers,
        )

    def ticket_config(self) -> GameConfig:
        """Constraints used when generating tickets.

        Sum bounds are 30% and 70% of ``max_number * numbers``, floored.
        """
        span = self.max_number * self.numbers
        return GameConfig(
            min_number=1,
            max_number=self.max_number,
            required_count=self.numbers,
            max_consecutive=2,
            min_sum=span * 3 // 10,
            max_sum=span * 7 // 10,
        )


class HistoricalDraw(BaseModel):
    """A past real-world draw. Main numbers are unordered."""

    model_config = {"frozen": True}

    numbers: tuple[int, ...]
    date: str | None = None
    extra: tuple[int, ...] | None = None
    stars: tuple[int, ...] | None = None
