"""aws-login CLI

A command line utility to simplify logging into AWS accounts and services.
It wraps the AWS CLI, merging related commands into single subcommands, and
uses shareable profile templates to keep profile names and settings
consistent across an organization.
"""

from typing import Optional

import typer

from . import __version__
from .core import LiveContext, exits_on_error, setup_logging
from .modules import debug, ecr, eks, profile, pull, rds, shell, sso, templates
from .modules.pull import Resolve
from .modules.shell import Action


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"aws-login {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="aws-login",
    help="Simplify logging into AWS accounts and services",
    no_args_is_help=True,
)


@app.callback()
def _global(
    ctx: typer.Context,
    profile_name: Optional[str] = typer.Option(
        None, "--profile", help="Overrides the active AWS CLI profile"
    ),
    region: Optional[str] = typer.Option(
        None, "--region", help="Overrides the default AWS region"
    ),
    debug_logging: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    log_file: Optional[str] = typer.Option(
        None, "--log-file", help="Write debug logging to a file"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    setup_logging(debug=debug_logging, log_file=log_file)
    ctx.obj = LiveContext(profile=profile_name, region=region)


@app.command("debug")
@exits_on_error
def debug_command(
    ctx: typer.Context,
    error: bool = typer.Option(
        False, "--error", "-e", help="Causes the command to produce an error"
    ),
):
    """Check that the application responds from the command line"""
    debug.execute(ctx.obj, error=error)


@app.command("ecr")
@exits_on_error
def ecr_command(ctx: typer.Context):
    """Log Docker into the Elastic Container Registry"""
    ecr.execute(ctx.obj)


@app.command("eks")
@exits_on_error
def eks_command(
    ctx: typer.Context,
    cluster: Optional[str] = typer.Argument(None, help="The name of the cluster"),
):
    """Configure kubectl for an Elastic Kubernetes Service cluster"""
    eks.execute(ctx.obj, cluster)


@app.command("profile")
@exits_on_error
def profile_command(ctx: typer.Context):
    """Create and/or select an AWS CLI profile"""
    profile.execute(ctx.obj)


@app.command("pull")
@exits_on_error
def pull_command(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="The URL to download the templates from"),
    resolve: Optional[Resolve] = typer.Option(
        None,
        "--resolve",
        "-r",
        case_sensitive=False,
        help="How to handle existing local templates: cancel, merge or replace",
    ),
):
    """Download profile templates from a URL"""
    pull.execute(ctx.obj, url, resolve)


@app.command("rds")
@exits_on_error
def rds_command(
    ctx: typer.Context,
    username: str = typer.Argument(..., help="The database username"),
    port: Optional[str] = typer.Option(None, "--port", "-p", help="The database port"),
):
    """Generate an IAM token for an RDS Proxy"""
    rds.execute(ctx.obj, username, port)


@app.command("shell")
@exits_on_error
def shell_command(
    ctx: typer.Context,
    action: Action = typer.Argument(..., help="init or install"),
    shell_name: str = typer.Option(
        ..., "--shell", "-s", help="The shell to integrate with: bash, zsh"
    ),
    init: Optional[str] = typer.Option(
        None, "--init", "-i", help="The startup script of the shell (e.g. ~/.bashrc)"
    ),
):
    """Integrate the application with the shell"""
    shell.execute(ctx.obj, action, shell_name, init)


@app.command("sso")
@exits_on_error
def sso_command(ctx: typer.Context):
    """Log in with SSO, configuring the profile first if needed"""
    sso.execute(ctx.obj)


@app.command("templates")
@exits_on_error
def templates_command(
    ctx: typer.Context,
    output_format: str = typer.Option("table", "--format", help="table|json|yaml"),
    show_all: bool = typer.Option(
        False, "--all", "-a", help="Include disabled templates"
    ),
):
    """Show the resolved profile templates"""
    templates.execute(ctx.obj, output_format, show_all)


def main():
    app()


if __name__ == "__main__":
    main()
