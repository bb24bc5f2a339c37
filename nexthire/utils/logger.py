import logging
import sys
from typing import Optional

from nexthire.config import LOG_LEVEL


def resolve_level(name: str) -> int:
    """Map a LOG_LEVEL name to its number; unknown names mean INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a named logger writing to stdout, configured once."""
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(level or resolve_level(LOG_LEVEL))

        console_handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        console_handler.setFormatter(formatter)

        logger.addHandler(console_handler)

    return logger


app_logger = setup_logger("app")
auth_logger = setup_logger("auth")
db_logger = setup_logger("db")
