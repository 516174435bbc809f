"""
Tests for logging setup.

Uvicorn's loggers must end up writing through the root handlers with
the server's own format.

Run with: python -m pytest tests/test_logging.py -v
"""

import logging

import pytest

from discover_api.app.core.logging_config import (
    CONSOLE_HANDLER_NAME,
    LOG_FORMAT,
    UVICORN_LOGGERS,
    setup_logging,
)


@pytest.fixture
def stray_uvicorn_handlers():
    """Give uvicorn's loggers their own handlers, as uvicorn's default config does."""
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.addHandler(logging.StreamHandler())
        uvicorn_logger.propagate = False
    yield
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True


class TestUvicornLoggers:
    def test_handlers_removed_and_propagating(self, stray_uvicorn_handlers):
        setup_logging("INFO")
        for name in UVICORN_LOGGERS:
            uvicorn_logger = logging.getLogger(name)
            assert uvicorn_logger.handlers == []
            assert uvicorn_logger.propagate is True

    def test_records_reach_root(self, stray_uvicorn_handlers, caplog):
        setup_logging("INFO")
        caplog.set_level(logging.INFO)
        logging.getLogger("uvicorn.error").info("Application startup complete.")
        assert "Application startup complete." in [r.getMessage() for r in caplog.records]

    def test_root_handler_uses_server_format(self):
        setup_logging("INFO")
        handlers = [h for h in logging.getLogger().handlers if h.get_name() == CONSOLE_HANDLER_NAME]
        assert len(handlers) == 1
        assert handlers[0].formatter._fmt == LOG_FORMAT

    def test_repeated_setup_adds_one_handler(self):
        setup_logging("INFO")
        setup_logging("INFO")
        names = [h.get_name() for h in logging.getLogger().handlers]
        assert names.count(CONSOLE_HANDLER_NAME) == 1
