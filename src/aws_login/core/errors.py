"""Error type shared by every fallible operation in aws-login."""

import sys
from contextlib import contextmanager
from typing import Iterator, List, NoReturn, Optional

from rich.console import Console

# Spaces added for each level of context.
INDENT = "  "


class AppError(Exception):
    """An error carrying an exit status and a stack of context messages.

    Context frames are stored in the order they were added, so the most
    recently added (outermost) frame is last. When rendered, the frames are
    printed most-recent-first, each one indented deeper than the last, with
    the message at the deepest level.

    Usage:
        raise AppError(1, "The region could not be determined.")

        raise AppError(2).with_message("Bad input.").with_context("Could not parse.")
    """

    def __init__(self, status: int = 1, message: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.message = message
        self.context: List[str] = []

    @classmethod
    def from_os_error(cls, error: OSError) -> "AppError":
        """Convert an I/O failure, keeping the OS error code as the status."""
        return cls(error.errno or 1, str(error))

    def with_message(self, message: str) -> "AppError":
        self.message = message
        self.args = (message,)
        return self

    def with_context(self, context: str) -> "AppError":
        self.context.append(context)
        return self

    def render(self) -> str:
        """Render the context stack and message as an indented list.

        Returns an empty string if there is no message, even when context
        frames are present.
        """
        if self.message is None:
            return ""

        lines = []
        depth = 0
        for frame in reversed(self.context):
            lines.append(f"{INDENT * depth}{frame}\n")
            depth += 1
        lines.append(f"{INDENT * depth}{self.message}\n")

        return "".join(lines)

    def exit(self) -> NoReturn:
        """Print the rendered error to stderr and exit with the status."""
        rendered = self.render()
        if rendered:
            Console(stderr=True, soft_wrap=True).print(
                rendered, style="red", end="", markup=False, highlight=False
            )
        sys.exit(self.status)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"AppError(status={self.status!r}, message={self.message!r}, "
            f"context={self.context!r})"
        )


@contextmanager
def error_context(context: str) -> Iterator[None]:
    """Add context to any error raised inside the block.

    An ``OSError`` is converted into an ``AppError`` first. Anything that
    completes successfully is left untouched.

    Usage:
        with error_context("Could not save the downloaded templates."):
            set_templates(remote)
    """
    try:
        yield
    except AppError as error:
        raise error.with_context(context)
    except OSError as error:
        raise AppError.from_os_error(error).with_context(context) from error
