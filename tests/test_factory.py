import logging

import pytest

from divisible_pairs.core.config import config
from divisible_pairs.core.counting import (
    BruteForcePairCounter,
    RemainderPairCounter,
    count_divisible_pairs,
    create_counter,
    divisible_sum_pairs,
)
from divisible_pairs.core.errors import InvalidDivisor, InvalidSequence


def test_default_strategy_is_brute_force():
    assert isinstance(create_counter(), BruteForcePairCounter)


def test_strategy_from_environment(monkeypatch):
    monkeypatch.setenv("PAIR_COUNT_STRATEGY", "remainder")
    config.reload()
    assert isinstance(create_counter(), RemainderPairCounter)


def test_explicit_name_overrides_config(monkeypatch):
    monkeypatch.setenv("PAIR_COUNT_STRATEGY", "remainder")
    config.reload()
    assert isinstance(create_counter("brute_force"), BruteForcePairCounter)


def test_unknown_strategy_falls_back_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="divisible_pairs"):
        counter = create_counter("quantum")
    assert isinstance(counter, BruteForcePairCounter)
    assert "Unknown counting strategy 'quantum'" in caplog.text


def test_count_divisible_pairs_example():
    assert count_divisible_pairs([1, 3, 2, 6, 1, 2], 3) == 5
    assert count_divisible_pairs([1, 3, 2, 6, 1, 2], 3, strategy="remainder") == 5


def test_divisible_sum_pairs_classic_signature():
    assert divisible_sum_pairs(6, 3, [1, 3, 2, 6, 1, 2]) == 5
    assert divisible_sum_pairs(3, 1, [1, 2, 3]) == 3
    assert divisible_sum_pairs(4, 5, [5, 10, 15, 20]) == 6
    assert divisible_sum_pairs(0, 4, []) == 0


def test_divisible_sum_pairs_rejects_length_mismatch():
    with pytest.raises(InvalidSequence):
        divisible_sum_pairs(5, 3, [1, 3, 2, 6, 1, 2])


def test_divisible_sum_pairs_rejects_zero_divisor():
    with pytest.raises(InvalidDivisor):
        divisible_sum_pairs(6, 0, [1, 3, 2, 6, 1, 2])


def test_invalid_divisor_is_a_value_error():
    with pytest.raises(ValueError):
        count_divisible_pairs([1, 2], 0)
