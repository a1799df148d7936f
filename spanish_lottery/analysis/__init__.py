from spanish_lottery.analysis.patterns import analyze_pattern, is_prime
from spanish_lottery.analysis.validator import validate_numbers
from spanish_lottery.analysis.generator import (
    generate_bonus_numbers,
    generate_optimized_numbers,
    is_similar_pattern,
)

__all__ = [
    "analyze_pattern",
    "is_prime",
    "validate_numbers",
    "generate_bonus_numbers",
    "generate_optimized_numbers",
    "is_similar_pattern",
]
