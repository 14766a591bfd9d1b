"""Integration with the Z shell."""

from .base import Setup
from .bash import INIT_SCRIPT


class ZshSetup(Setup):
    name = "zsh"
    startup_name = ".zshrc"
    # The function wrapper is valid zsh as written.
    template = INIT_SCRIPT
