"""Opt-in logging setup for applications embedding assocarray.

The library itself only emits records on the `assocarray` logger hierarchy:
growth of a backing store at `DEBUG` and each mutation at `TRACE`. Nothing
is configured on import; applications which want to see those records call
`configure_root_logger`, whose defaults come from the environment:

`ASSOCARRAY_LOGGING_LEVEL`
    a level name (case-insensitive, `TRACE` included) or a number;
    `WARNING` when unset

`ASSOCARRAY_USE_DEV_LOGGER`
    `true`, `1` or `yes` to write records to stderr rather than discard
    them
"""
import logging
import os
from typing import Optional, Union

TRACE = 5

logging.addLevelName(TRACE, "TRACE")

LOGGER_NAME = "assocarray"
LOGGING_LEVEL_ENVVAR = "ASSOCARRAY_LOGGING_LEVEL"
DEV_LOGGER_ENVVAR = "ASSOCARRAY_USE_DEV_LOGGER"

DEFAULT_LEVEL = "WARNING"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] - %(message)s"

Level = Union[int, str]

_installed_handler: Optional[logging.Handler] = None


def get_level() -> Level:
    """Return the level requested by the environment, normalized so that
    `logging` accepts it."""
    level = os.getenv(LOGGING_LEVEL_ENVVAR, "").strip() or DEFAULT_LEVEL
    if level.isdigit():
        return int(level)
    return level.upper()


def use_dev_logger() -> bool:
    return os.getenv(DEV_LOGGER_ENVVAR, "").lower() in {"1", "true", "yes"}


def get_handler(
    level: Optional[Level] = None, fmt: str = DEFAULT_FORMAT
) -> logging.Handler:
    handler: logging.Handler = (
        logging.StreamHandler() if use_dev_logger() else logging.NullHandler()
    )
    handler.setFormatter(logging.Formatter(fmt))
    handler.setLevel(level if level is not None else get_level())
    return handler


def configure_root_logger(
    level: Optional[Level] = None, fmt: str = DEFAULT_FORMAT
) -> logging.Logger:
    """Set the level of the `assocarray` logger and attach a handler to it.

    Calling this again replaces the handler installed by the previous call
    rather than stacking another one beside it."""
    global _installed_handler

    level = level if level is not None else get_level()
    logger = logging.getLogger(LOGGER_NAME)
    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)
    _installed_handler = get_handler(level=level, fmt=fmt)
    logger.setLevel(level)
    logger.addHandler(_installed_handler)
    return logger
