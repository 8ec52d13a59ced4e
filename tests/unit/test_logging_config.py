"""Тесты настройки логирования."""

import logging
from logging.handlers import RotatingFileHandler

from funds_transfer.logging_config import PACKAGE_LOGGER, setup_logging


def test_level_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.delenv("LOG_FILE", raising=False)

    logger = setup_logging()

    assert logger.name == PACKAGE_LOGGER
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.delenv("LOG_FILE", raising=False)
    logger = setup_logging(level="verbose")
    assert logger.level == logging.INFO


def test_repeated_setup_does_not_duplicate_handlers(tmp_path):
    log_file = tmp_path / "logs" / "transfer.log"

    setup_logging(level="INFO", log_file=str(log_file))
    logger = setup_logging(level="INFO", log_file=str(log_file))

    assert len(logger.handlers) == 2
    assert any(isinstance(h, RotatingFileHandler) for h in logger.handlers)

    logging.getLogger(f"{PACKAGE_LOGGER}.transfer.service").info("transfer done")
    for handler in logger.handlers:
        handler.flush()
    assert "transfer done" in log_file.read_text(encoding="utf-8")
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
