"""Filesystem locations used by aws-login."""

import os
import sys
from pathlib import Path

# Overrides the configuration directory, mostly useful for testing.
CONFIG_DIR_ENV = "AWS_LOGIN_CONFIG_DIR"

TEMPLATES_FILE_NAME = "templates.json"


def get_config_dir() -> Path:
    """Return the directory holding the aws-login configuration."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)

    if sys.platform == "win32":
        return Path.home() / "AppData" / "Roaming" / "AWS Login"
    return Path.home() / ".config" / "aws-login"


def get_templates_file() -> Path:
    """Return the path to the profile templates file."""
    return get_config_dir() / TEMPLATES_FILE_NAME
