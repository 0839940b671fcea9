"""Counting by remainder class.

Two values sum to a multiple of k exactly when their remainders modulo
abs(k) are complementary (r + s == 0 mod abs(k)). Bucketing the sequence by
remainder therefore gives the same count as the brute force in linear time.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from divisible_pairs.core.counting.base import PairCounter

logger = logging.getLogger(__name__)

_INT64_MAX = int(np.iinfo(np.int64).max)


def remainder_histogram(values: tuple[int, ...], modulus: int) -> dict[int, int]:
    """Return ``{remainder: occurrences}`` for ``values`` modulo a positive ``modulus``.

    Remainders use Python's floored modulo, so they are always in
    ``[0, modulus)`` even for negative values.
    """
    if not values:
        return {}
    remainders = [value % modulus for value in values]
    # Remainders are below the modulus; only fall back to object arrays when it exceeds int64.
    dtype = np.int64 if modulus <= _INT64_MAX else object
    residues, counts = np.unique(np.asarray(remainders, dtype=dtype), return_counts=True)
    return {int(r): int(c) for r, c in zip(residues.tolist(), counts.tolist())}


class RemainderPairCounter(PairCounter):
    """Combines complementary remainder classes. O(n log n) time, O(n) space."""

    name = "remainder"

    def _count(self, values: tuple[int, ...], divisor: int) -> int:
        if len(values) < 2:
            return 0

        modulus = abs(divisor)
        histogram = remainder_histogram(values, modulus)
        logger.debug("Remainder classes mod %d: %s", modulus, histogram)

        total = 0
        for residue, occurrences in histogram.items():
            complement = (modulus - residue) % modulus
            if residue == complement:
                # Remainder 0, or modulus / 2 for even moduli: pairs within the class
                total += occurrences * (occurrences - 1) // 2
            elif residue < complement:
                total += occurrences * histogram.get(complement, 0)
        return total

    def get_info(self) -> dict[str, Any]:
        return {"strategy": self.name, "time": "O(n log n)", "space": "O(n)", "backend": "numpy"}
