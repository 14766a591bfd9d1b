"""Tests for shell integration"""

import shutil
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from aws_login.core import AppError
from aws_login.modules import shell as shell_module
from aws_login.modules.shell import Action
from aws_login.shell import (
    INSTALLED_COMMENT,
    SCRIPT_PATH,
    SHELL_NAME,
    Environment,
    get_env,
    get_setup,
)
from aws_login.shell.bash import BashSetup
from aws_login.shell.zsh import ZshSetup

requires_bash = pytest.mark.skipif(shutil.which("bash") is None, reason="requires bash")


class TestGetEnv:
    def test_not_integrated(self, no_shell):
        assert get_env() is None

    def test_unsupported_shell(self, monkeypatch, tmp_path):
        monkeypatch.setenv(SHELL_NAME, "fish")
        monkeypatch.setenv(SCRIPT_PATH, str(tmp_path / "script"))
        assert get_env() is None

    def test_missing_script_path(self, monkeypatch):
        monkeypatch.setenv(SHELL_NAME, "bash")
        monkeypatch.delenv(SCRIPT_PATH, raising=False)
        assert get_env() is None

    @pytest.mark.parametrize("shell", ["bash", "zsh"])
    def test_integrated(self, monkeypatch, tmp_path, shell):
        script = tmp_path / "script"
        monkeypatch.setenv(SHELL_NAME, shell)
        monkeypatch.setenv(SCRIPT_PATH, str(script))

        env = get_env()

        assert isinstance(env, Environment)
        assert env.script == script


class TestEnvironment:
    def test_set_var_appends_export(self, tmp_path):
        script = tmp_path / "script"
        env = Environment(script)

        env.set_var("AWS_PROFILE", "dev")
        env.set_var("AWS_REGION", "eu-west-1")

        assert script.read_text() == (
            "export AWS_PROFILE=dev\n" "export AWS_REGION=eu-west-1\n"
        )

    def test_set_var_failure(self, tmp_path):
        env = Environment(tmp_path / "missing-dir" / "script")

        with pytest.raises(AppError) as exc_info:
            env.set_var("AWS_PROFILE", "dev")

        assert exc_info.value.context == ["Could not set environment variable."]

    def test_value_is_quoted(self, tmp_path):
        script = tmp_path / "script"

        Environment(script).set_var("AWS_PROFILE", "team dev")

        assert script.read_text() == "export AWS_PROFILE='team dev'\n"

    @requires_bash
    def test_value_is_not_executed(self, tmp_path):
        script = tmp_path / "script"
        marker = tmp_path / "marker"
        value = f'x"; touch {marker}; echo "$(touch {marker})'

        Environment(script).set_var("AWS_PROFILE", value)
        result = subprocess.run(
            [
                "bash",
                "-c",
                'eval "$(cat "$1")"; printf %s "$AWS_PROFILE"',
                "bash",
                str(script),
            ],
            stdout=subprocess.PIPE,
        )

        assert result.returncode == 0
        assert result.stdout.decode("utf-8") == value
        assert not marker.exists()


class TestSetup:
    def test_get_setup(self):
        assert isinstance(get_setup("bash"), BashSetup)
        assert isinstance(get_setup("zsh"), ZshSetup)
        assert get_setup("fish") is None

    def test_default_startup_scripts(self, monkeypatch, tmp_path):
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path)
        assert get_setup("bash").startup == tmp_path / ".bashrc"
        assert get_setup("zsh").startup == tmp_path / ".zshrc"

    def test_custom_startup_script(self, tmp_path):
        setup = get_setup("bash", str(tmp_path / "custom.sh"))
        assert setup.startup == tmp_path / "custom.sh"

    @pytest.mark.parametrize("shell", ["bash", "zsh"])
    def test_generate_script(self, shell):
        script = get_setup(shell).generate_script()

        assert "aws-login()" in script
        assert f"AWS_LOGIN_SHELL={shell} command aws-login" in script
        assert 'AWS_LOGIN_SCRIPT="$AWS_LOGIN_SCRIPT"' in script
        assert "{" + "AWS_LOGIN" not in script

    def test_install(self, tmp_path):
        startup = tmp_path / ".bashrc"
        startup.write_text("# existing\n")
        setup = get_setup("bash", str(startup))

        assert setup.is_installed() is False
        setup.install()

        text = startup.read_text()
        assert text.startswith("# existing\n")
        assert INSTALLED_COMMENT in text
        assert 'eval "$(aws-login shell init -s bash)"' in text
        assert setup.is_installed() is True

    def test_missing_startup_not_installed(self, tmp_path):
        assert get_setup("zsh", str(tmp_path / ".zshrc")).is_installed() is False

    def test_startup_not_utf8(self, tmp_path):
        startup = tmp_path / ".bashrc"
        startup.write_bytes(b"# caf\xe9\n")
        setup = BashSetup(str(startup))

        assert setup.is_installed() is False
        setup.install()
        assert setup.is_installed() is True
        assert startup.read_bytes().startswith(b"# caf\xe9\n")

    def test_startup_check_failure(self, tmp_path):
        setup = BashSetup(str(tmp_path / ".bashrc"))

        denied = PermissionError(13, "Permission denied")
        with patch.object(Path, "exists", side_effect=denied):
            with pytest.raises(AppError) as exc_info:
                setup.is_installed()

        assert exc_info.value.status == 13
        assert exc_info.value.context == [
            "Could not check if the integration is already set up."
        ]


class TestShellCommand:
    def test_init_prints_script(self, context):
        shell_module.execute(context, Action.INIT, "bash")
        assert "aws-login()" in context.output_as_string()

    def test_install_then_already_installed(self, context, tmp_path):
        startup = tmp_path / ".zshrc"

        shell_module.execute(context, Action.INSTALL, "zsh", str(startup))
        assert "installed into" in context.output_as_string()
        assert INSTALLED_COMMENT in startup.read_text()

        shell_module.execute(context, Action.INSTALL, "zsh", str(startup))
        assert "already installed" in context.output_as_string()
        assert startup.read_text().count(INSTALLED_COMMENT) == 1

    def test_unsupported_shell(self, context):
        with pytest.raises(AppError, match="not supported"):
            shell_module.execute(context, Action.INIT, "fish")
