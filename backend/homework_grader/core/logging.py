"""
Logging configuration for the application.

Handlers live on the "homework_grader" logger. Modules log through child
loggers (get_logger(__name__)) that propagate to it.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from homework_grader.core.config import get_config, get_log_path

APP_LOGGER_NAME = "homework_grader"

# Third-party loggers that log every request at INFO/DEBUG
NOISY_LOGGERS = ("LiteLLM", "litellm", "googleapiclient.discovery_cache", "httpx")

_configured = False


def setup_logging() -> logging.Logger:
    """
    Attach rotating-file and stdout handlers to the application logger once.

    Returns:
        The "homework_grader" logger.
    """
    global _configured

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    if _configured:
        return app_logger

    log_config = get_config().logging
    level = getattr(logging, log_config.level.upper(), logging.INFO)
    app_logger.setLevel(level)
    app_logger.handlers.clear()

    file_handler = RotatingFileHandler(
        get_log_path(),
        maxBytes=log_config.max_size * 1024 * 1024,  # MB to bytes
        backupCount=log_config.backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(log_config.format))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(log_config.console_format))

    app_logger.addHandler(file_handler)
    app_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    _configured = True
    return app_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Logger for a module, e.g. get_logger(__name__).

    Names outside the "homework_grader" namespace (such as "main") are nested
    under it so their records reach the configured handlers.
    """
    setup_logging()
    if not name or name == APP_LOGGER_NAME:
        return logging.getLogger(APP_LOGGER_NAME)
    if not name.startswith(APP_LOGGER_NAME + "."):
        name = f"{APP_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
