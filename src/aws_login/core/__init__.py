"""Core utilities for aws-login"""

from .errors import AppError, error_context
from .context import Context, LiveContext, BufferContext
from .run import Run, ProgramCache, PROGRAM_CACHE, aws
from .term import select
from .decorators import exits_on_error
from .renderer import DisplayRenderer
from .logging import setup_logging, get_logger, logger

__all__ = [
    "AppError",
    "error_context",
    "Context",
    "LiveContext",
    "BufferContext",
    "Run",
    "ProgramCache",
    "PROGRAM_CACHE",
    "aws",
    "select",
    "exits_on_error",
    "DisplayRenderer",
    "setup_logging",
    "get_logger",
    "logger",
]
