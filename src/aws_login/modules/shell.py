"""Integrate the application with the user's shell."""

from enum import Enum
from typing import Optional

from ..core import AppError, Context, error_context
from ..shell import get_setup


class Action(str, Enum):
    """What to do with the shell environment."""

    INIT = "init"
    INSTALL = "install"


def execute(
    context: Context, action: Action, shell: str, init: Optional[str] = None
) -> None:
    """Print the initialization script or install it into a startup script."""
    setup = get_setup(shell, init)
    if setup is None:
        raise AppError(1, "The shell is not supported.")

    if action is Action.INIT:
        with error_context("Could not write initialization script to output."):
            context.outputln(setup.generate_script())
        return

    if setup.is_installed():
        context.outputln("The integration is already installed.")
    else:
        setup.install()
        context.outputln(f"The integration was installed into: {setup.startup}")
