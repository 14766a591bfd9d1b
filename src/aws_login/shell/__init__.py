"""Shell integration for aws-login.

A command cannot change the environment of the shell that started it, so the
integration wraps aws-login in a shell function. The function hands aws-login
a script file through ``AWS_LOGIN_SCRIPT`` and evaluates whatever was written
to it after aws-login exits.
"""

import os
from typing import Dict, Optional, Type

from .base import (
    BIN_NAME,
    INSTALLED_COMMENT,
    SCRIPT_PATH,
    SHELL_NAME,
    Environment,
    Setup,
    export_line,
)
from .bash import BashSetup
from .zsh import ZshSetup

SETUPS: Dict[str, Type[Setup]] = {
    "bash": BashSetup,
    "zsh": ZshSetup,
}


def get_env() -> Optional[Environment]:
    """Return the environment of the integrated shell, if there is one."""
    shell = os.environ.get(SHELL_NAME)
    script = os.environ.get(SCRIPT_PATH)

    if shell not in SETUPS or not script:
        return None

    return Environment(script)


def get_setup(shell: str, init: Optional[str] = None) -> Optional[Setup]:
    """Return the integration setup for a shell, or None if unsupported."""
    setup = SETUPS.get(shell)
    return setup(init) if setup else None


__all__ = [
    "BIN_NAME",
    "INSTALLED_COMMENT",
    "SCRIPT_PATH",
    "SHELL_NAME",
    "SETUPS",
    "Environment",
    "Setup",
    "get_env",
    "get_setup",
    "export_line",
]
