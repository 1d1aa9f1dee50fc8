"""Tests for logging setup."""

import logging

import pytest

from gmocoin.logging import LOG_FILE_NAME, configure_logging


@pytest.fixture(autouse=True)
def restore_package_logger(monkeypatch):
    monkeypatch.delenv("GMOCOIN_LOG_LEVEL", raising=False)
    logger = logging.getLogger("gmocoin")
    saved = (logger.level, logger.propagate, logger.handlers[:])
    yield
    for handler in logger.handlers[:]:
        if handler not in saved[2]:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(saved[0])
    logger.propagate = saved[1]


def test_root_logger_untouched():
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    root.addHandler(sentinel)
    before = root.handlers[:]
    root_level = root.level
    try:
        configure_logging()

        assert root.handlers == before
        assert root.level == root_level
    finally:
        root.removeHandler(sentinel)


def test_package_logger_configured(tmp_path):
    logger = configure_logging(tmp_path / "logs", "debug")

    assert logger.name == "gmocoin"
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert (tmp_path / "logs").is_dir()

    logging.getLogger("gmocoin.endpoints").debug("GET %s", "/v1/status")
    for handler in logger.handlers:
        handler.flush()
    assert "GET /v1/status" in (tmp_path / "logs" / LOG_FILE_NAME).read_text(encoding="utf-8")


def test_reconfigure_replaces_own_handlers_only(tmp_path):
    logger = logging.getLogger("gmocoin")
    foreign = logging.NullHandler()
    logger.addHandler(foreign)

    configure_logging(tmp_path)
    configure_logging(tmp_path)

    assert foreign in logger.handlers
    assert len(logger.handlers) == 3


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("GMOCOIN_LOG_LEVEL", "warning")

    assert configure_logging().level == logging.WARNING


def test_unknown_level_rejected():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging(level="LOUD")
