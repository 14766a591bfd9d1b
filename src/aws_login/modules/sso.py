"""Authenticate into an AWS account using SSO."""

from ..core import AppError, Context, aws, error_context

# The profile settings required for SSO.
REQUIRED_SETTINGS = (
    "sso_account_id",
    "sso_region",
    "sso_role_name",
    "sso_start_url",
)


def is_configured(context: Context) -> bool:
    """Check if the active profile has every setting required for SSO."""
    for key in REQUIRED_SETTINGS:
        try:
            value = aws(context).arg("configure").arg("get").arg(key).output()
        except AppError:
            # The AWS CLI exits non-zero for settings that are not set.
            return False
        if not value.strip():
            return False
    return True


def execute(context: Context) -> None:
    if is_configured(context):
        with error_context("Could not log in via SSO."):
            aws(context).arg("sso").arg("login").pass_through(context)
    else:
        with error_context("Could not configure AWS CLI profile for SSO."):
            aws(context).arg("configure").arg("sso").pass_through(context)
