"""Divisible sum pair counting strategies."""

from divisible_pairs.core.counting.base import PairCounter, validate_divisor, validate_values
from divisible_pairs.core.counting.brute_force import BruteForcePairCounter
from divisible_pairs.core.counting.factory import (
    DEFAULT_STRATEGY,
    STRATEGY_REGISTRY,
    count_divisible_pairs,
    create_counter,
    divisible_sum_pairs,
)
from divisible_pairs.core.counting.remainder import RemainderPairCounter, remainder_histogram

__all__ = [
    "PairCounter",
    "BruteForcePairCounter",
    "RemainderPairCounter",
    "STRATEGY_REGISTRY",
    "DEFAULT_STRATEGY",
    "create_counter",
    "count_divisible_pairs",
    "divisible_sum_pairs",
    "remainder_histogram",
    "validate_divisor",
    "validate_values",
]
