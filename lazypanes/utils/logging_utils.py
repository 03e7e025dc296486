"""Simple logging utilities for lazypanes.

Standard Logger Initialization Pattern
--------------------------------------
Modules use the standard Python pattern:

    import logging
    logger = logging.getLogger(__name__)

Handlers are configured once by the application. A TUI owns the terminal,
so logs go to a rotating file instead of the console.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config import get_config_dir, get_log_level

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_log_file() -> Path:
    log_dir = get_config_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "lazypanes.log"


def get_logger(name: str) -> logging.Logger:
    """Get a logger that writes to the lazypanes log file.

    Only use this for code that may run standalone; library modules should
    use ``logging.getLogger(__name__)``.
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = RotatingFileHandler(
            get_log_file(), maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(get_log_level())

    return logger


def setup_tui_logging(level: Optional[int] = None) -> logging.Logger:
    """
    Set up logging for a TUI session.

    The root logger is set to WARNING to avoid noise from third-party libs
    (Textual included). lazypanes.* loggers use LAZYPANES_LOG_LEVEL unless
    ``level`` is given.

    Returns:
        The ``lazypanes`` package logger
    """
    if not logging.getLogger().handlers:
        handler = RotatingFileHandler(
            get_log_file(), maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.basicConfig(level=logging.WARNING, handlers=[handler])

    package_logger = logging.getLogger("lazypanes")
    package_logger.setLevel(level if level is not None else get_log_level())
    return package_logger
