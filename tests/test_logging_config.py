"""Tests for centralized logging setup."""

from __future__ import annotations

import logging
import logging.handlers

from divisible_pairs.utils.logging_config import ColorFormatter, get_logger, setup_logging


def _flush_root_handlers() -> None:
    for handler in logging.getLogger().handlers:
        handler.flush()


def test_log_to_file_from_environment(monkeypatch, tmp_path):
    log_file = tmp_path / "nested" / "x.log"
    monkeypatch.setenv("LOG_TO_FILE", "true")
    monkeypatch.setenv("LOG_FILE", str(log_file))

    setup_logging(level="INFO", console=False)
    get_logger("divisible_pairs.tests").info("written to the rotating file")
    _flush_root_handlers()

    handlers = logging.getLogger().handlers
    assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in handlers)
    assert "written to the rotating file" in log_file.read_text()


def test_explicit_log_file_without_environment(tmp_path):
    log_file = tmp_path / "explicit.log"

    setup_logging(level="WARNING", log_file=str(log_file), console=False)
    logger = get_logger("divisible_pairs.tests")
    logger.info("below threshold")
    logger.warning("above threshold")
    _flush_root_handlers()

    text = log_file.read_text()
    assert "above threshold" in text
    assert "below threshold" not in text


def test_no_file_handler_by_default():
    setup_logging(level="INFO")
    handlers = logging.getLogger().handlers
    assert not any(isinstance(h, logging.handlers.RotatingFileHandler) for h in handlers)
    assert [type(h) for h in handlers] == [logging.StreamHandler]


def test_level_falls_back_to_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    setup_logging(console=False)
    assert logging.getLogger().level == logging.ERROR


def test_non_level_name_falls_back_to_warning():
    setup_logging(level="basic_format", console=False)
    assert logging.getLogger().level == logging.WARNING


def test_color_formatter_leaves_record_unchanged():
    record = logging.LogRecord("divisible_pairs", logging.INFO, __file__, 1, "hello", None, None)
    formatter = ColorFormatter("%(levelname)s %(message)s")

    output = formatter.format(record)

    assert output == f"{ColorFormatter.COLORS['INFO']}INFO{ColorFormatter.RESET} hello"
    assert record.levelname == "INFO"
    # A second handler formatting the same record must not see the escape codes
    assert logging.Formatter("%(levelname)s").format(record) == "INFO"
