"""Configure Docker to use the AWS Elastic Container Registry."""

from ..core import AppError, Context, Run, aws, error_context, get_logger

log = get_logger("ecr")


def generate_registry_uri(context: Context) -> str:
    """Generate the ECR registry URI for the active profile."""
    with error_context("Could not get account ID from AWS CLI."):
        account_id = (
            aws(context)
            .arg("sts")
            .arg("get-caller-identity")
            .arg("--query")
            .arg("Account")
            .arg("--output")
            .arg("text")
            .output()
            .strip()
        )

    region = context.region
    if region is None:
        with error_context("Could not get default region from AWS CLI."):
            region = aws(context).arg("configure").arg("get").arg("region").output().strip()

        if not region:
            raise AppError(1, "The region could not be determined.")

    return f"{account_id}.dkr.ecr.{region}.amazonaws.com"


def execute(context: Context) -> None:
    registry_uri = generate_registry_uri(context)
    log.debug("Logging Docker into %s", registry_uri)

    with error_context("Could not generate ECR password."):
        password = aws(context).arg("ecr").arg("get-login-password").output().strip()

    with error_context("Docker could not be configured to use the registry."):
        (
            Run("docker")
            .arg("login")
            .arg("--username")
            .arg("AWS")
            .arg("--password")
            .arg(password)
            .arg(registry_uri)
            .pass_through(context)
        )
