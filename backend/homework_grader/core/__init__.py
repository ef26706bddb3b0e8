"""
Core module initialization.
"""

from homework_grader.core.config import get_config, get_secrets, load_config
from homework_grader.core.database import get_db, init_db, drop_db, Base
from homework_grader.core.logging import get_logger, setup_logging

__all__ = [
    "get_config",
    "get_secrets",
    "load_config",
    "get_db",
    "init_db",
    "drop_db",
    "Base",
    "get_logger",
    "setup_logging",
]
