"""Combination generator: rejection sampling against historical fingerprints.

Candidates are drawn uniformly, filtered by the validator and accepted when
their fingerprint resembles at least one historical draw. Lottery draws are
independent, so this only produces "natural looking" tickets; it does not
change the odds of winning.
"""

import random
from collections.abc import Sequence

from loguru import logger

from spanish_lottery.analysis.patterns import analyze_pattern
from spanish_lottery.analysis.validator import validate_numbers
from spanish_lottery.exceptions import InvalidInputError
from spanish_lottery.schemas.analysis import GameConfig, NumberPattern
from spanish_lottery.schemas.lottery import BonusSpec

MAX_ATTEMPTS = 100

# Closeness thresholds against a single historical fingerprint
EVEN_TOLERANCE = 1
PRIME_TOLERANCE = 1
HIGH_LOW_TOLERANCE = 0.2


def is_similar_pattern(candidate: NumberPattern, historical: NumberPattern) -> bool:
    return (
        abs(candidate.even_count - historical.even_count) <= EVEN_TOLERANCE
        and abs(candidate.prime_count - historical.prime_count) <= PRIME_TOLERANCE
        and abs(candidate.high_low_ratio - historical.high_low_ratio) <= HIGH_LOW_TOLERANCE
    )


def matches_history(
    candidate: NumberPattern, historical_patterns: Sequence[NumberPattern]
) -> bool:
    """True if the candidate is close to any historical pattern.

    With no history every candidate matches.
    """
    if not historical_patterns:
        return True
    return any(is_similar_pattern(candidate, h) for h in historical_patterns)


def sample_distinct(
    rng: random.Random, low: int, high: int, count: int
) -> list[int]:
    """Draw ``count`` distinct integers in ``[low, high]``, rejecting repeats."""
    picked: list[int] = []
    while len(picked) < count:
        num = rng.randint(low, high)
        if num not in picked:
            picked.append(num)
    return picked


def generate_optimized_numbers(
    config: GameConfig,
    historical_patterns: Sequence[NumberPattern],
    *,
    max_attempts: int = MAX_ATTEMPTS,
    rng: random.Random | None = None,
) -> list[int]:
    """Search for a valid ticket resembling the historical fingerprints.

    Returns the accepted numbers sorted ascending, or an empty list when
    ``max_attempts`` candidates were tried without success. An empty result
    means "no combination found", not an invalid ticket.
    """
    range_size = config.max_number - config.min_number + 1
    if config.required_count > range_size:
        raise InvalidInputError(
            f"Cannot pick {config.required_count} distinct numbers "
            f"from {config.min_number}..{config.max_number}"
        )

    rng = rng or random.Random()

    for attempt in range(1, max_attempts + 1):
        candidate = sample_distinct(
            rng, config.min_number, config.max_number, config.required_count
        )

        if not validate_numbers(candidate, config).is_valid:
            continue

        pattern = analyze_pattern(candidate)
        if matches_history(pattern, historical_patterns):
            logger.debug("Accepted candidate {} after {} attempts", candidate, attempt)
            return sorted(candidate)

    logger.info(
        "No candidate matched {} historical patterns in {} attempts",
        len(historical_patterns), max_attempts,
    )
    return []


def generate_bonus_numbers(
    spec: BonusSpec, rng: random.Random | None = None
) -> list[int]:
    """Draw an extra/star group uniformly from ``1..spec.max_number``."""
    rng = rng or random.Random()
    return sample_distinct(rng, 1, spec.max_number, spec.count)
