"""Create and/or select an AWS CLI profile."""

from typing import List

from ..core import AppError, Context, Run, error_context, get_logger, select
from ..models import Profile
from ..profile import get_profiles
from ..shell import export_line, get_env

log = get_logger("profile")


def get_existing_profiles(context: Context) -> List[str]:
    """List the profiles already known to the AWS CLI."""
    # The --profile override may name a profile that does not exist yet.
    with error_context("Could not get a list of existing AWS CLI profiles."):
        output = Run("aws").arg("configure").arg("list-profiles").output()
    return output.split()


def create_profile(context: Context, profile: Profile) -> None:
    """Create the AWS CLI profile one setting at a time."""
    log.debug("Creating the AWS CLI profile %s", profile.name)

    for key, value in sorted(profile.settings.items()):
        with error_context(f"Could not set the profile setting, {key}."):
            (
                Run("aws")
                .arg("--profile")
                .arg(profile.name)
                .arg("configure")
                .arg("set")
                .arg(key)
                .arg(value)
                .pass_through(context)
            )


def execute(context: Context) -> None:
    existing = get_existing_profiles(context)
    profiles = get_profiles()

    name = context.profile
    if name is None:
        merged = sorted(set(profiles) | set(existing))
        if not merged:
            raise AppError(1, "There are no profiles available to choose from.")
        name = select("Please select a profile to use:", merged)

    if name not in existing:
        profile = profiles.get(name)
        if profile is None:
            raise AppError(1, f"The profile, {name}, does not exist.")
        create_profile(context, profile)

    env = get_env()
    if env is not None:
        env.set_var("AWS_PROFILE", name)
    else:
        context.errorln("The application is not integrated into the shell.")
        context.errorln("Please run the following shell code manually:\n")
        context.outputln(export_line("AWS_PROFILE", name))
