"""Pydantic schemas for statistics."""

from pydantic import BaseModel

from spanish_lottery.schemas.analysis import NumberPattern


class FrequencyRecord(BaseModel):
    number: int
    frequency: int
    last_drawn: str | None = None


class GamePatterns(BaseModel):
    game_type: str
    total_draws: int
    patterns: list[NumberPattern]


class GameCacheInfo(BaseModel):
    source: str  # "scraped" / "fallback"
    draws: int


class CacheStatus(BaseModel):
    loaded: bool
    age_seconds: float | None
    ttl_seconds: int
    games: dict[str, GameCacheInfo]
