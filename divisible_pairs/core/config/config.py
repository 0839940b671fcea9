"""Configuration management implementation.

Contains the AppConfig class implementation.
Separated from __init__.py so the package only handles imports/exports.
"""

import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

# Classic example input: n=6, k=3, ar=[1, 3, 2, 6, 1, 2]
EXAMPLE_DIVISOR = 3
EXAMPLE_VALUES: tuple[int, ...] = (1, 3, 2, 6, 1, 2)

OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_FILE = "logs/divisible_pairs.log"


def parse_int_list(raw: str) -> tuple[int, ...]:
    """Parse a comma and/or whitespace separated list of integers.

    Raises:
        ValueError: If any item is not an integer literal.
    """
    items = raw.replace(",", " ").split()
    return tuple(int(item) for item in items)


class AppConfig:
    """Application configuration (Singleton pattern).

    Centralizes all configuration management with environment variable support.

    This class should only be instantiated once.
    Use the `config` instance from __init__.py instead of creating new instances.
    """

    _instance: "AppConfig | None" = None
    _initialized: bool

    def __new__(cls) -> "AppConfig":
        """Singleton implementation - only one instance allowed."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        if self._initialized:
            return

        self._load_from_env()
        self._initialized = True
        logger.debug("Configuration initialized")

    def _load_from_env(self) -> None:
        """Internal method to load values from environment variables."""
        self._issues: list[str] = []

        # Counting
        self.counting_strategy = os.getenv("PAIR_COUNT_STRATEGY", "brute_force").strip().lower()

        # Default input (used when the CLI receives none)
        raw_divisor = os.getenv("DEFAULT_DIVISOR", str(EXAMPLE_DIVISOR))
        try:
            self.default_divisor = int(raw_divisor)
        except ValueError:
            self._issues.append(f"DEFAULT_DIVISOR is not an integer: {raw_divisor!r}")
            self.default_divisor = EXAMPLE_DIVISOR

        raw_values = os.getenv("DEFAULT_VALUES")
        if raw_values is None:
            self.default_values = EXAMPLE_VALUES
        else:
            try:
                self.default_values = parse_int_list(raw_values)
            except ValueError:
                self._issues.append(f"DEFAULT_VALUES is not a list of integers: {raw_values!r}")
                self.default_values = EXAMPLE_VALUES

        # Output
        self.output_format = os.getenv("OUTPUT_FORMAT", "text").strip().lower()

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
        self.log_to_file = os.getenv("LOG_TO_FILE", "false").lower() == "true"
        self.log_file = os.getenv("LOG_FILE", DEFAULT_LOG_FILE)

    def reload(self) -> None:
        """Force reload configuration from environment variables."""
        logger.debug("Reloading configuration from environment...")
        self._load_from_env()

    def validate(self) -> list[str]:
        """Validate configuration and return list of issues."""
        from divisible_pairs.core.counting import STRATEGY_REGISTRY

        issues = list(self._issues)
        if self.counting_strategy not in STRATEGY_REGISTRY:
            issues.append(
                f"Unknown PAIR_COUNT_STRATEGY '{self.counting_strategy}' "
                f"(expected one of: {', '.join(sorted(STRATEGY_REGISTRY))})"
            )
        if self.default_divisor == 0:
            issues.append("DEFAULT_DIVISOR must be non-zero")
        if self.output_format not in OUTPUT_FORMATS:
            issues.append(f"Unknown OUTPUT_FORMAT '{self.output_format}'")
        if self.log_level not in LOG_LEVELS:
            issues.append(f"Unknown LOG_LEVEL '{self.log_level}'")
        return issues

    def to_dict(self) -> dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            "counting_strategy": self.counting_strategy,
            "default_divisor": self.default_divisor,
            "default_values": list(self.default_values),
            "output_format": self.output_format,
            "log_level": self.log_level,
            "log_to_file": self.log_to_file,
            "log_file": self.log_file,
        }
