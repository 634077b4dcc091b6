import logging
import os
from typing import Optional

TRACE = 5

logging.addLevelName(TRACE, "TRACE")

LOGGER_NAME = "hashtable"
LEVEL_ENV_VAR = "HASHTABLE_LOGGING_LEVEL"
DEV_LOGGER_ENV_VAR = "HASHTABLE_USE_DEV_LOGGER"

DEFAULT_LEVEL = "WARNING"
DEFAULT_FORMAT = (
    "%(asctime)s %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] - %(message)s"
)


def get_level() -> str:
    """Get the logging level for hashtable from the environment."""
    return os.getenv(LEVEL_ENV_VAR, DEFAULT_LEVEL)


def use_dev_logger() -> bool:
    """Return True if log records should be written to stderr rather than
    discarded."""
    return os.getenv(DEV_LOGGER_ENV_VAR, "").lower() == "true"


def get_handler(
    level: Optional[str] = None, fmt: str = DEFAULT_FORMAT
) -> logging.Handler:
    """Get the handler for hashtable log records.

    Records are discarded by a `NullHandler` unless the dev logger is enabled,
    in which case they go to a `StreamHandler` on stderr."""
    handler: logging.Handler = (
        logging.StreamHandler() if use_dev_logger() else logging.NullHandler()
    )
    handler.setFormatter(logging.Formatter(fmt))
    handler.setLevel(level or get_level())
    return handler


def configure_root_logger(
    level: Optional[str] = None, fmt: str = DEFAULT_FORMAT
) -> logging.Logger:
    """Configure and return the logger every hashtable module logs beneath.

    The library never calls this itself; applications which want hashtable log
    records call it once at startup."""
    level = level or get_level()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.addHandler(get_handler(level=level, fmt=fmt))
    return logger
