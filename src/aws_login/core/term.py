"""Interactive terminal prompts."""

from typing import Sequence, TypeVar

import questionary

from .errors import AppError

T = TypeVar("T")


def select(prompt: str, items: Sequence[T]) -> T:
    """Prompt the user to select an item from a list.

    Each item is displayed using ``str()``. The first item is selected by
    default.

    Raises:
        AppError: The list is empty or the prompt was canceled.
    """
    if not items:
        raise AppError(1, "There are no items available to choose from.")

    choices = [
        questionary.Choice(title=str(item), value=index)
        for index, item in enumerate(items)
    ]

    try:
        index = questionary.select(prompt, choices=choices).unsafe_ask()
    except (KeyboardInterrupt, EOFError) as error:
        raise AppError(1, "Prompt was canceled.") from error

    if index is None:
        raise AppError(1, "Prompt was canceled.")

    return items[index]
