"""Base classes for shell integration."""

import shlex
from pathlib import Path
from typing import Optional

from ..core.errors import error_context
from ..core.logging import get_logger

log = get_logger("shell")

# The name of the installed command.
BIN_NAME = "aws-login"

# The environment variable naming the shell the integration was installed for.
SHELL_NAME = "AWS_LOGIN_SHELL"

# The environment variable naming the file of shell code evaluated after exit.
SCRIPT_PATH = "AWS_LOGIN_SCRIPT"

# Marks the startup script as already integrated.
INSTALLED_COMMENT = "# Integrate aws-login into the shell environment."


def export_line(name: str, value: str) -> str:
    """Shell code that exports a variable, with the value quoted for eval."""
    return f"export {name}={shlex.quote(value)}"


class Environment:
    """Modifies the environment of the shell that invoked aws-login.

    Shell code is appended to the script file named by ``AWS_LOGIN_SCRIPT``.
    The integration function evaluates the file once aws-login has exited.
    """

    def __init__(self, script: Path):
        self.script = Path(script)

    def set_var(self, name: str, value: str) -> None:
        log.debug("Exporting %s through %s", name, self.script)
        with error_context("Could not set environment variable."):
            with self.script.open("a", encoding="utf-8") as file:
                file.write(export_line(name, value) + "\n")


class Setup:
    """Integrates aws-login into the startup script of a shell."""

    name = ""
    startup_name = ""
    template = ""

    def __init__(self, init: Optional[str] = None):
        if init:
            self.startup = Path(init).expanduser()
        else:
            self.startup = Path.home() / self.startup_name

    def generate_script(self) -> str:
        """Generate the shell code that defines the integration function."""
        return (
            self.template.replace("{AWS_LOGIN}", BIN_NAME)
            .replace("{AWS_LOGIN_SHELL}", SHELL_NAME)
            .replace("{AWS_LOGIN_SCRIPT}", SCRIPT_PATH)
            .replace("{SHELL}", self.name)
        )

    def is_installed(self) -> bool:
        with error_context("Could not check if the integration is already set up."):
            if not self.startup.exists():
                return False
            # Startup scripts are not necessarily UTF-8.
            return INSTALLED_COMMENT.encode("utf-8") in self.startup.read_bytes()

    def install(self) -> None:
        log.debug("Installing %s integration into %s", self.name, self.startup)
        with error_context("Could not install integration script."):
            with self.startup.open("a", encoding="utf-8") as file:
                file.write(f"\n{INSTALLED_COMMENT}\n")
                file.write(f'eval "$({BIN_NAME} shell init -s {self.name})"\n')
