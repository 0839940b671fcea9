"""Pair counter interface.

Defines the abstract PairCounter interface and the input validation shared
by every counting strategy.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from divisible_pairs.core.errors import InvalidDivisor, InvalidSequence


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_divisor(divisor: Any) -> int:
    """Return ``divisor`` as an int, rejecting zero and non-integers."""
    if not _is_integer(divisor):
        raise InvalidDivisor(divisor)
    divisor = int(divisor)
    if divisor == 0:
        raise InvalidDivisor(divisor, "Divisor must be non-zero (modulo by zero is undefined)")
    return divisor


def validate_values(values: Iterable[Any]) -> tuple[int, ...]:
    """Return ``values`` as a tuple of ints, rejecting non-integer elements."""
    checked: list[int] = []
    for index, value in enumerate(values):
        if not _is_integer(value):
            raise InvalidSequence(
                f"Element at index {index} is not an integer: {value!r}",
                details={"index": index, "value": repr(value)},
            )
        checked.append(int(value))
    return tuple(checked)


class PairCounter(ABC):
    """Abstract base class for divisible sum pair counters (Strategy pattern).

    Implementations count unordered index pairs ``(i, j)``, ``i < j``, whose
    element sum is a multiple of the divisor. They hold no state between
    calls.
    """

    name: str = "abstract"

    def count(self, values: Iterable[int], divisor: int) -> int:
        """Count the pairs of ``values`` whose sum is divisible by ``divisor``.

        Args:
            values: Ordered integer sequence. Empty and single-element
                sequences yield 0.
            divisor: Non-zero integer k. Negative divisors are accepted;
                divisibility by k equals divisibility by abs(k).

        Returns:
            Number of qualifying pairs, between 0 and n * (n - 1) / 2.

        Raises:
            InvalidDivisor: If ``divisor`` is zero or not an integer.
            InvalidSequence: If an element is not an integer.
        """
        checked_divisor = validate_divisor(divisor)
        checked_values = validate_values(values)
        return self._count(checked_values, checked_divisor)

    @abstractmethod
    def _count(self, values: tuple[int, ...], divisor: int) -> int:
        """Count pairs on already validated input."""
        raise NotImplementedError

    @abstractmethod
    def get_info(self) -> dict[str, Any]:
        """Return strategy metadata (name, time complexity)."""
        raise NotImplementedError


__all__ = ["PairCounter", "validate_divisor", "validate_values"]
