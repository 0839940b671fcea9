"""Centralized logging configuration for divisible-pairs.

Console logs go to stderr; stdout is reserved for the counting result.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path


class ColorFormatter(logging.Formatter):
    """Colored console formatter for better readability."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        if record.levelname in self.COLORS:
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"

        return super().format(record)


def setup_logging(
    level: str | None = None, log_file: str | None = None, console: bool = True, colored: bool = True
) -> None:
    """Set up centralized logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            falls back to the LOG_LEVEL env var, then WARNING
        log_file: Optional file path for logging to file
        console: Whether to log to console (stderr)
        colored: Whether to use colored console output
    """
    level = level or os.getenv("LOG_LEVEL", "WARNING")
    if log_file is None and os.getenv("LOG_TO_FILE", "false").lower() == "true":
        log_file = os.getenv("LOG_FILE", "logs/divisible_pairs.log")

    numeric_level = getattr(logging, level.upper(), None)
    # Names like "basic_format" resolve to non-level attributes of the logging module
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(numeric_level)

    base_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)

        if colored and sys.stderr.isatty():
            formatter: logging.Formatter = ColorFormatter(base_format, date_format)
        else:
            formatter = logging.Formatter(base_format, date_format)

        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5  # 10MB
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(base_format, date_format))
        root_logger.addHandler(file_handler)

    logging.getLogger("divisible_pairs").setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Get a properly configured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
