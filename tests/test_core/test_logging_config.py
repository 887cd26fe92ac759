"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from schema_docs.config import Settings
from schema_docs.core.logging_config import LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


class TestSetupLogging:
    """Test generator logging configuration."""

    def test_console_only_by_default(self):
        """Without a log directory only the console handler is attached."""
        logger = setup_logging(Settings(_env_file=None))

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert logger.level == logging.INFO

    def test_file_handler_with_log_dir(self, tmp_path):
        """A log directory adds a rotating file handler."""
        log_dir = tmp_path / "logs"
        logger = setup_logging(Settings(_env_file=None, LOG_DIR=str(log_dir), LOG_LEVEL="DEBUG"))

        file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert (log_dir / "docgen.log").exists()
        assert logger.level == logging.DEBUG

    def test_repeated_setup_does_not_duplicate(self):
        """Calling setup twice should not stack handlers."""
        settings = Settings(_env_file=None)
        setup_logging(settings)
        logger = setup_logging(settings)

        assert len(logger.handlers) == 1
