# AGPL-3.0 License

import logging
import sys
from enum import Enum

from loguru import logger


class LoggingFormat(str, Enum):
    CONSOLE = "CONSOLE"
    JSON = "JSON"


CONSOLE_FORMAT = "<level>{level: <8}</level> | {message}"


def setup_logger(level: str = "INFO", fmt: LoggingFormat = LoggingFormat.CONSOLE):
    """
    Route all log output to stderr.

    CI reads stderr as the failure channel, so stdout is left untouched.
    """
    level: int = logging.getLevelName(str(level).upper())
    if type(level) is not int:
        level = logging.INFO

    logger.remove(None)
    if fmt == LoggingFormat.JSON:
        logger.add(
            sys.stderr,
            level=level,
            format="{message}",
            colorize=False,
            serialize=True,
        )
    else:
        logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    return logger


def get_logger(*args, **kwargs):
    return logger
