"""Tests for logging setup."""

import logging

import pytest
import structlog

from ordersvc.infrastructure.config import Settings
from ordersvc.infrastructure.logging import add_context, clear_context, configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers, root.level = handlers, level
    structlog.reset_defaults()
    clear_context()


def _last_processor():
    return structlog.get_config()["processors"][-1]


def test_production_logs_json():
    configure_logging(Settings(environment="production", log_level="INFO"))

    assert isinstance(_last_processor(), structlog.processors.JSONRenderer)
    assert logging.getLogger().level == logging.INFO


def test_development_logs_to_console():
    configure_logging(Settings(environment="development", log_level="DEBUG"))

    assert isinstance(_last_processor(), structlog.dev.ConsoleRenderer)
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_context_is_bound_and_cleared():
    add_context(request_id="abc")
    assert structlog.contextvars.get_contextvars() == {"request_id": "abc"}
    clear_context()
    assert structlog.contextvars.get_contextvars() == {}
