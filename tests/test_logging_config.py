"""Tests for process logging setup."""
import logging

import pytest

from neighbourly_api.app.core.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_library_levels():
    names = ("pymongo", "aiosmtplib")
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


class TestSetupLogging:
    def test_library_loggers_are_clamped(self):
        setup_logging("INFO")

        assert logging.getLogger("pymongo").level == logging.WARNING
        assert logging.getLogger("aiosmtplib").level == logging.WARNING

    def test_debug_opens_library_loggers(self):
        setup_logging("DEBUG")

        assert logging.getLogger("pymongo").level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        assert setup_logging("chatty") == logging.INFO

    def test_uvicorn_logs_through_root(self):
        logging.getLogger("uvicorn.access").addHandler(logging.NullHandler())

        setup_logging("INFO")

        access = logging.getLogger("uvicorn.access")
        assert access.handlers == []
        assert access.propagate is True
