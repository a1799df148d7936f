"""Structural validation of a main-number ticket against a GameConfig."""

from collections.abc import Sequence

from spanish_lottery.schemas.analysis import GameConfig, ValidationResult


def longest_consecutive_run(numbers: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers (0 for empty input)."""
    ordered = sorted(numbers)
    if not ordered:
        return 0

    longest = current = 1
    for prev, curr in zip(ordered, ordered[1:]):
        if curr == prev + 1:
            current += 1
        else:
            current = 1
        longest = max(longest, current)
    return longest


def validate_numbers(numbers: Sequence[int], config: GameConfig) -> ValidationResult:
    """Check every constraint and collect all violations in a fixed order.

    Messages are user-facing and returned verbatim to the client.
    """
    errors: list[str] = []

    if any(n < config.min_number or n > config.max_number for n in numbers):
        errors.append(
            f"Los números deben estar entre {config.min_number} y {config.max_number}"
        )

    if len(set(numbers)) != len(numbers):
        errors.append("No se permiten números duplicados")

    if len(numbers) != config.required_count:
        errors.append(f"Se requieren exactamente {config.required_count} números")

    if config.max_consecutive is not None:
        if longest_consecutive_run(numbers) > config.max_consecutive:
            errors.append(
                f"Demasiados números consecutivos (máximo {config.max_consecutive})"
            )

    total = sum(numbers)
    if config.min_sum is not None and total < config.min_sum:
        errors.append(f"La suma total debe ser al menos {config.min_sum}")
    if config.max_sum is not None and total > config.max_sum:
        errors.append(f"La suma total no debe exceder {config.max_sum}")

    return ValidationResult(is_valid=not errors, errors=errors)
