"""Tests for logging configuration."""

import logging

import pytest

from photo_contest.app_logging import configure_logging


@pytest.fixture
def app_logger():  # type: ignore[no-untyped-def]
    logger = logging.getLogger("photo_contest")
    saved = list(logger.handlers)
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved


def test_repeated_configuration_keeps_one_handler(app_logger) -> None:  # type: ignore[no-untyped-def]
    for _ in range(3):
        configure_logging()

    assert len(app_logger.handlers) == 1
    assert app_logger.level == logging.INFO
    assert app_logger.propagate is False


def test_service_loggers_share_the_app_handler(app_logger) -> None:  # type: ignore[no-untyped-def]
    configure_logging()
    handler = app_logger.handlers[0]
    record = logging.LogRecord(
        "photo_contest.services.experience",
        logging.INFO,
        __file__,
        1,
        "XP grant: %s",
        ("+5",),
        None,
    )

    assert handler.format(record) == (
        "INFO: photo_contest.services.experience: XP grant: +5"
    )
    child = logging.getLogger("photo_contest.services.experience")
    assert child.getEffectiveLevel() == logging.INFO
