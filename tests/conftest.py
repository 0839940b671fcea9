"""Pytest configuration and shared fixtures for tests."""

import logging

import pytest

from divisible_pairs.core.config import config

logger = logging.getLogger(__name__)

CONFIG_ENV_VARS = (
    "PAIR_COUNT_STRATEGY",
    "DEFAULT_DIVISOR",
    "DEFAULT_VALUES",
    "OUTPUT_FORMAT",
    "LOG_LEVEL",
    "LOG_TO_FILE",
    "LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Run every test against the built-in defaults, not the caller's environment."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config.reload()
    yield
    config.reload()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handlers installed by setup_logging() during CLI tests."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    package_level = logging.getLogger("divisible_pairs").level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("divisible_pairs").setLevel(package_level)


@pytest.fixture
def example_values():
    """The classic example sequence; with k=3 it has 5 divisible sum pairs."""
    return [1, 3, 2, 6, 1, 2]


@pytest.fixture
def mixed_sign_values():
    """Negative and positive values, where floored and truncated modulo disagree."""
    return [-7, -3, -1, 0, 2, 4, 5, 9, -12, 13]


@pytest.fixture(params=["brute_force", "remainder"])
def strategy_name(request):
    """Every registered counting strategy."""
    return request.param
