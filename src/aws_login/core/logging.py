"""Logging for aws-login.

Stderr is shared with the output relayed from ``aws`` and ``docker``, so the
console only shows warnings unless ``--debug`` is given. A ``--log-file``
collects the full debug trace without touching the console.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Package logger
logger = logging.getLogger("aws_login")


def _console_handler(debug: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _file_handler(path: Union[str, Path]) -> logging.Handler:
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logging(
    debug: bool = False, log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """Configure the package logger for one invocation.

    Args:
        debug: Show debug messages on stderr
        log_file: File that receives every debug message, appended to

    Returns:
        The package logger
    """
    # The file wants debug records even when the console does not.
    logger.setLevel(logging.DEBUG if debug or log_file else logging.INFO)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(debug))
    if log_file:
        logger.addHandler(_file_handler(log_file))

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger, e.g. ``get_logger("run")`` -> ``aws_login.run``."""
    return logger.getChild(name)
