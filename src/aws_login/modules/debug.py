"""A subcommand used for testing the application from the command line."""

from ..core import AppError, Context


def execute(context: Context, error: bool = False) -> None:
    """Produce a successful response, or an error response if asked to."""
    if error:
        context.errorln("Producing an error response.\n")
        raise AppError(123, "The --error option was used.").with_context(
            "The subcommand could not complete successfully."
        )

    context.outputln("Producing a successful response.")
