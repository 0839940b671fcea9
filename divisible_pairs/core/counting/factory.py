"""Counter factory and convenience entry points.

Implements the strategy registry used to pick a PairCounter by name.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from divisible_pairs.core.config import config
from divisible_pairs.core.counting.base import PairCounter
from divisible_pairs.core.counting.brute_force import BruteForcePairCounter
from divisible_pairs.core.counting.remainder import RemainderPairCounter
from divisible_pairs.core.errors import InvalidSequence

logger = logging.getLogger(__name__)

STRATEGY_REGISTRY: dict[str, type[PairCounter]] = {
    "brute_force": BruteForcePairCounter,
    "remainder": RemainderPairCounter,
}

DEFAULT_STRATEGY = "brute_force"


def create_counter(name: str | None = None) -> PairCounter:
    """Create a counting strategy by name.

    Args:
        name: Registry key; defaults to the configured strategy.

    Returns:
        PairCounter instance. Unknown names fall back to brute force.
    """
    strategy_name = (name or config.counting_strategy or DEFAULT_STRATEGY).strip().lower()
    counter_cls = STRATEGY_REGISTRY.get(strategy_name)
    if counter_cls is None:
        logger.warning("Unknown counting strategy '%s'; falling back to %s", strategy_name, DEFAULT_STRATEGY)
        counter_cls = STRATEGY_REGISTRY[DEFAULT_STRATEGY]
    logger.debug("Using counting strategy '%s'", counter_cls.name)
    return counter_cls()


def count_divisible_pairs(values: Sequence[int], divisor: int, strategy: str | None = None) -> int:
    """Count index pairs ``i < j`` with ``(values[i] + values[j]) % divisor == 0``."""
    counter = create_counter(strategy)
    count = counter.count(values, divisor)
    logger.debug("n=%d k=%s -> %d pairs (%s)", len(values), divisor, count, counter.name)
    return count


def divisible_sum_pairs(n: int, k: int, ar: Sequence[int]) -> int:
    """Classic three-argument form: ``n`` must be the length of ``ar``.

    Raises:
        InvalidSequence: If ``n`` does not match ``len(ar)``.
        InvalidDivisor: If ``k`` is zero.
    """
    if n != len(ar):
        raise InvalidSequence(
            f"Declared n={n} does not match sequence length {len(ar)}",
            details={"n": n, "length": len(ar)},
        )
    return count_divisible_pairs(ar, k, strategy=DEFAULT_STRATEGY)


__all__ = [
    "STRATEGY_REGISTRY",
    "DEFAULT_STRATEGY",
    "create_counter",
    "count_divisible_pairs",
    "divisible_sum_pairs",
]
