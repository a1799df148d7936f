"""Pydantic schemas for pattern analysis, validation and generation."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator


class GameConfig(BaseModel):
    """Structural constraints a main-number ticket must satisfy."""

    model_config = {"frozen": True}

    min_number: int = 1
    max_number: int
    required_count: int = Field(gt=0)
    max_consecutive: int | None = None
    min_sum: int | None = None
    max_sum: int | None = None

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.min_number > self.max_number:
            raise ValueError(
                f"min_number ({self.min_number}) must not exceed max_number ({self.max_number})"
            )
        return self


class NumberPattern(BaseModel):
    even_count: int
    odd_count: int
    prime_count: int
    sum_range: int  # arithmetic sum of the numbers
    consecutive_count: int
    high_low_ratio: float


class ValidationResult(BaseModel):
    is_valid: bool
    errors: list[str]


# --- API payloads ---

class NumbersRequest(BaseModel):
    numbers: list[int]


class ValidateRequest(NumbersRequest):
    strict: bool = False  # also enforce generator sum/consecutive bounds


class GenerateResponse(BaseModel):
    game_type: str
    status: Literal["ok", "exhausted"]
    numbers: list[int]
    stars: list[int] = []
    extra: list[int] = []
    extra_name: str | None = None
    pattern: NumberPattern | None = None
    historical_patterns: int
    message: str | None = None
