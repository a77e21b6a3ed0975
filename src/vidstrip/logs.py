"""Logging setup for the command line."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Send vidstrip's log records to stderr.

    Calling this again replaces the handler instead of adding a second one.
    """
    logger = logging.getLogger("vidstrip")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
