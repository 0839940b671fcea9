"""Data models for pair counting requests and results.

Provides PairCountRequest and PairCountResult dataclasses used across the
project.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from divisible_pairs.core.errors import InvalidDivisor, InvalidSequence


@dataclass(frozen=True)
class PairCountRequest:
    """A sequence and the divisor its pair sums are tested against.

    Attributes:
        values: Ordered integer sequence (read-only for the whole count).
        divisor: Non-zero integer k.
    """

    values: tuple[int, ...] = ()
    divisor: int = 1

    @property
    def n(self) -> int:
        return len(self.values)

    @property
    def max_pairs(self) -> int:
        """Return the number of unordered index pairs, n * (n - 1) / 2."""
        return self.n * (self.n - 1) // 2

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PairCountRequest:
        """Create a request from JSON-like data.

        Accepts either ``{"k": 3, "ar": [...]}`` or
        ``{"divisor": 3, "values": [...]}``. An optional ``n`` must match the
        sequence length.

        Args:
            data: Mapping with the divisor and the sequence.

        Returns:
            PairCountRequest instance.

        Raises:
            InvalidDivisor: If no divisor is present.
            InvalidSequence: If the sequence is missing or ``n`` disagrees.
        """
        if not isinstance(data, dict):
            raise InvalidSequence(f"Expected a JSON object, got {type(data).__name__}")

        divisor = data.get("k", data.get("divisor"))
        if divisor is None:
            raise InvalidDivisor(None, "Request is missing the divisor ('k' or 'divisor')")

        raw_values = data.get("ar", data.get("values"))
        if not isinstance(raw_values, list):
            raise InvalidSequence("Request is missing the sequence ('ar' or 'values') array")

        declared_n = data.get("n")
        if declared_n is not None and declared_n != len(raw_values):
            raise InvalidSequence(
                f"Declared n={declared_n} does not match sequence length {len(raw_values)}",
                details={"n": declared_n, "length": len(raw_values)},
            )

        return cls(values=tuple(raw_values), divisor=divisor)


@dataclass
class PairCountResult:
    """Outcome of one counting pass.

    Attributes:
        count: Number of qualifying pairs.
        divisor: Divisor used.
        n: Length of the input sequence.
        strategy: Name of the counting strategy that produced the count.
        pairs: Optional list of qualifying (i, j) index pairs.
    """

    count: int
    divisor: int
    n: int
    strategy: str = "brute_force"
    pairs: list[tuple[int, int]] | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        """Convert PairCountResult to a plain dict suitable for JSON."""
        result: dict[str, Any] = {
            "count": int(self.count),
            "k": int(self.divisor),
            "n": int(self.n),
            "strategy": self.strategy,
        }
        if self.pairs is not None:
            result["pairs"] = [[i, j] for i, j in self.pairs]
        return result
