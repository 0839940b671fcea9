"""Count the pairs of an integer sequence whose sum is divisible by k."""

from __future__ import annotations

from divisible_pairs.core.counting import count_divisible_pairs, divisible_sum_pairs
from divisible_pairs.core.errors import InvalidDivisor, InvalidSequence, PairCountError

__version__ = "0.1.0"

__all__ = [
    "count_divisible_pairs",
    "divisible_sum_pairs",
    "InvalidDivisor",
    "InvalidSequence",
    "PairCountError",
    "__version__",
]
