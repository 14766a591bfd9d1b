"""Shared pytest fixtures"""

import json

import pytest

from aws_login.config import CONFIG_DIR_ENV
from aws_login.core import BufferContext, ProgramCache
from aws_login.shell import SCRIPT_PATH, SHELL_NAME


@pytest.fixture
def context():
    """Context that collects output in memory"""
    return BufferContext()


@pytest.fixture
def program_cache():
    """A fresh PATH lookup cache"""
    return ProgramCache()


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the configuration directory at a temporary directory"""
    path = tmp_path / "config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(path))
    return path


@pytest.fixture
def write_templates(config_dir):
    """Write a templates document into the configuration directory"""

    def write(document):
        config_dir.mkdir(parents=True, exist_ok=True)
        path = config_dir / "templates.json"
        path.write_text(json.dumps(document))
        return path

    return write


@pytest.fixture
def no_shell(monkeypatch):
    """Run as if the shell integration is not installed"""
    monkeypatch.delenv(SHELL_NAME, raising=False)
    monkeypatch.delenv(SCRIPT_PATH, raising=False)


@pytest.fixture
def sample_templates():
    """Templates with inheritance and disabled bases"""
    return {
        "base": {
            "enabled": False,
            "settings": {"region": "eu-west-1", "output": "json"},
        },
        "sso": {
            "enabled": False,
            "extends": "base",
            "settings": {
                "sso_start_url": "https://example.awsapps.com/start",
                "sso_region": "eu-west-1",
            },
        },
        "dev": {
            "extends": "sso",
            "settings": {"sso_account_id": 111111111111, "sso_role_name": "Developer"},
        },
        "prod": {
            "extends": "sso",
            "settings": {
                "region": "us-east-1",
                "sso_account_id": 222222222222,
                "sso_role_name": "ReadOnly",
            },
        },
    }
