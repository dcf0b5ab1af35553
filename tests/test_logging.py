"""Tests for stderr logging setup."""

import logging
import sys

import pytest


@pytest.fixture
def fresh_logger(request):
    """A logger name unique to the test, with handlers removed afterwards"""
    name = f"business_planner.test.{request.node.name}"
    yield name
    log = logging.getLogger(name)
    for handler in list(log.handlers):
        log.removeHandler(handler)


def test_package_logger_writes_to_stderr():
    from business_planner.utils.logging import PACKAGE_LOGGER, logger

    assert logger.name == PACKAGE_LOGGER
    assert any(getattr(h, "stream", None) is sys.stderr for h in logger.handlers)


def test_debug_flag_sets_level(monkeypatch, fresh_logger):
    from business_planner.config import Config
    from business_planner.utils.logging import setup_logging

    monkeypatch.setattr(Config, "ENABLE_LOGGING", True)
    monkeypatch.setattr(Config, "DEBUG", True)

    log = setup_logging(fresh_logger)

    assert log.level == logging.DEBUG
    assert log.handlers[0].level == logging.DEBUG


def test_repeated_setup_keeps_one_handler(monkeypatch, fresh_logger):
    from business_planner.config import Config
    from business_planner.utils.logging import setup_logging

    monkeypatch.setattr(Config, "ENABLE_LOGGING", True)
    monkeypatch.setattr(Config, "DEBUG", False)

    setup_logging(fresh_logger)
    log = setup_logging(fresh_logger)

    assert len(log.handlers) == 1
    assert log.level == logging.INFO


def test_disabled_logging_only_passes_critical(monkeypatch, fresh_logger):
    from business_planner.config import Config
    from business_planner.utils.logging import setup_logging

    monkeypatch.setattr(Config, "ENABLE_LOGGING", False)

    log = setup_logging(fresh_logger)

    assert log.level == logging.CRITICAL
    assert log.handlers == []
