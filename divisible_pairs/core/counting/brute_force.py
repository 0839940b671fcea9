"""Exhaustive pair enumeration."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from divisible_pairs.core.counting.base import PairCounter, validate_divisor, validate_values


class BruteForcePairCounter(PairCounter):
    """Checks every index pair ``i < j`` once. O(n^2) time, O(1) extra space."""

    name = "brute_force"

    def _count(self, values: tuple[int, ...], divisor: int) -> int:
        count = 0
        n = len(values)
        for i in range(n):
            for j in range(i + 1, n):
                if (values[i] + values[j]) % divisor == 0:
                    count += 1
        return count

    def iter_pairs(self, values: Iterable[int], divisor: int) -> Iterator[tuple[int, int]]:
        """Yield every qualifying ``(i, j)`` index pair in lexicographic order."""
        checked_divisor = validate_divisor(divisor)
        checked_values = validate_values(values)
        n = len(checked_values)
        for i in range(n):
            for j in range(i + 1, n):
                if (checked_values[i] + checked_values[j]) % checked_divisor == 0:
                    yield (i, j)

    def get_info(self) -> dict[str, Any]:
        return {"strategy": self.name, "time": "O(n^2)", "space": "O(1)"}
