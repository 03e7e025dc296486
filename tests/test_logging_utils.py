"""Tests for logging setup."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from lazypanes.utils.logging_utils import get_log_file, get_logger, setup_tui_logging


class TestLogging:
    """Test log file handling."""

    def test_log_file_in_config_dir(self, isolated_config: Path) -> None:
        assert get_log_file() == isolated_config / "lazypanes.log"

    def test_get_logger_writes_to_file(self, isolated_config: Path) -> None:
        logger = get_logger("lazypanes.test_get_logger")
        try:
            logger.info("hello from the test")
            for handler in logger.handlers:
                handler.flush()
            assert "hello from the test" in (isolated_config / "lazypanes.log").read_text()
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()

    def test_get_logger_configures_once(self, isolated_config: Path) -> None:
        logger = get_logger("lazypanes.test_configures_once")
        try:
            get_logger("lazypanes.test_configures_once")
            assert len(logger.handlers) == 1
            assert isinstance(logger.handlers[0], RotatingFileHandler)
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()

    def test_setup_tui_logging_level(self, isolated_config: Path) -> None:
        package_logger = setup_tui_logging(logging.DEBUG)
        try:
            assert package_logger.name == "lazypanes"
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(logging.NOTSET)
