"""Statistical fingerprint of a set of lottery numbers."""

from collections.abc import Iterable

from spanish_lottery.exceptions import InvalidInputError
from spanish_lottery.schemas.analysis import NumberPattern


def is_prime(num: int) -> bool:
    """Deterministic trial-division primality test (6k +/- 1 wheel)."""
    if num <= 1:
        return False
    if num <= 3:
        return True
    if num % 2 == 0 or num % 3 == 0:
        return False

    i = 5
    while i * i <= num:
        if num % i == 0 or num % (i + 2) == 0:
            return False
        i += 6
    return True


def count_consecutive_pairs(sorted_numbers: list[int]) -> int:
    """Adjacent pairs in an ascending list that differ by exactly 1."""
    return sum(
        1 for prev, curr in zip(sorted_numbers, sorted_numbers[1:])
        if curr == prev + 1
    )


def analyze_pattern(numbers: Iterable[int]) -> NumberPattern:
    """Compute the fingerprint of a number set.

    The median is the element at index ``len // 2`` of the sorted numbers,
    so for even-sized sets it is the upper of the two middle values.
    ``high_low_ratio`` is the share of numbers strictly above it.

    Works on a sorted copy; the caller's sequence keeps its order.

    Raises:
        InvalidInputError: if ``numbers`` is empty.
    """
    ordered = sorted(numbers)
    size = len(ordered)
    if size == 0:
        raise InvalidInputError("Cannot analyze an empty set of numbers")

    even_count = sum(1 for n in ordered if n % 2 == 0)
    median = ordered[size // 2]
    high_count = sum(1 for n in ordered if n > median)

    return NumberPattern(
        even_count=even_count,
        odd_count=size - even_count,
        prime_count=sum(1 for n in ordered if is_prime(n)),
        sum_range=sum(ordered),
        consecutive_count=count_consecutive_pairs(ordered),
        high_low_ratio=high_count / size,
    )
