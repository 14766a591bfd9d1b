"""Show the resolved profile templates."""

from ..core import Context, DisplayRenderer
from ..profile import get_profiles


def execute(context: Context, fmt: str = "table", include_disabled: bool = False) -> None:
    profiles = get_profiles(include_disabled=include_disabled)

    if not profiles:
        context.errorln("There are no profile templates.")
        return

    rendered = DisplayRenderer().render(profiles, fmt)
    context.output.write(rendered.encode("utf-8"))
    context.output.flush()
