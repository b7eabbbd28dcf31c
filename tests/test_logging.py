"""Tests for logging setup."""

import logging

from code_overview.logging_config import get_logger, setup_logging


class TestSetupLogging:
    def test_levels(self):
        assert setup_logging().level == logging.WARNING
        assert setup_logging(verbose=True).level == logging.DEBUG
        assert setup_logging(verbose=True, quiet=True).level == logging.ERROR

    def test_returns_package_logger(self):
        assert setup_logging().name == "code_overview"


class TestGetLogger:
    def test_module_names_are_kept(self):
        assert get_logger("code_overview.scanning.engine").name == "code_overview.scanning.engine"

    def test_short_names_are_namespaced(self):
        assert get_logger("providers").name == "code_overview.providers"

    def test_default_is_package_logger(self):
        assert get_logger() is logging.getLogger("code_overview")
