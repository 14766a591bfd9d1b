"""Decorators for command line entry points."""

from functools import wraps
from typing import Any, Callable

from .errors import AppError
from .logging import get_logger

log = get_logger("cli")


def exits_on_error(func: Callable) -> Callable:
    """Turn an ``AppError`` escaping a command into the process exit.

    The error is rendered on stderr and the process exits with the status
    it carries.

    Usage:
        @app.command("sso")
        @exits_on_error
        def sso_command(ctx: typer.Context):
            ...
    """

    @wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        try:
            return func(*args, **kwargs)
        except AppError as error:
            log.debug("%s failed: %r", func.__name__, error)
            error.exit()

    return wrapper
