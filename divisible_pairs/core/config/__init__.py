"""Configuration package.

This package provides centralized configuration management.
Implementation is in config.py - this __init__.py only handles imports/exports.
"""

from divisible_pairs.core.config.config import (
    EXAMPLE_DIVISOR,
    EXAMPLE_VALUES,
    LOG_LEVELS,
    OUTPUT_FORMATS,
    AppConfig,
    parse_int_list,
)

# Singleton instance - use this throughout the application
config = AppConfig()

__all__ = [
    "AppConfig",
    "config",
    "EXAMPLE_DIVISOR",
    "EXAMPLE_VALUES",
    "LOG_LEVELS",
    "OUTPUT_FORMATS",
    "parse_int_list",
]
