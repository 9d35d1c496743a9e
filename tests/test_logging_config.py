"""Tests for logging setup."""

import logging

import pytest

from complexity_report.logging_config import LOGGER_NAME, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    setup_logging()


class TestSetupLogging:
    def test_default_level_is_warning(self):
        assert setup_logging().level == logging.WARNING

    def test_verbose(self):
        assert setup_logging(verbose=True).level == logging.DEBUG

    def test_quiet_wins_over_verbose(self):
        assert setup_logging(verbose=True, quiet=True).level == logging.ERROR

    def test_handlers_replaced(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        setup_logging(verbose=True, log_file=str(log_file))
        get_logger("collector").debug("visited pkg")
        assert "complexity_report.collector - DEBUG - visited pkg" in log_file.read_text()


def test_get_logger_namespaces():
    assert get_logger().name == LOGGER_NAME
    assert get_logger("engine").name == "complexity_report.engine"
    assert get_logger("complexity_report.reporter").name == "complexity_report.reporter"
