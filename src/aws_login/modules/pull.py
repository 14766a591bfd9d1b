"""Download profile templates from a URL."""

from enum import Enum
from typing import Optional

import requests

from ..core import AppError, Context, error_context, get_logger, select
from ..profile import get_templates, parse_templates, set_templates

log = get_logger("pull")

# Seconds to wait for the templates server.
DOWNLOAD_TIMEOUT = 30


class Resolve(str, Enum):
    """How to handle local templates when downloading remote ones."""

    CANCEL = "cancel"
    MERGE = "merge"
    REPLACE = "replace"

    def __str__(self) -> str:
        return {
            Resolve.CANCEL: "Cancel the download.",
            Resolve.MERGE: "Merge with the existing templates.",
            Resolve.REPLACE: "Replace the existing templates.",
        }[self]


def download(url: str) -> str:
    """Download the templates document."""
    log.debug("Downloading profile templates from %s", url)

    try:
        response = requests.get(url, timeout=DOWNLOAD_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as error:
        raise AppError(1, str(error)).with_context(
            "The templates could not be downloaded."
        ) from error

    return response.text


def execute(context: Context, url: str, resolve: Optional[Resolve] = None) -> None:
    """Download templates and combine them with any local templates.

    Merging keeps local templates unless a remote template has the same
    name. Replacing discards every local template.
    """
    text = download(url)

    with error_context("Could not parse the downloaded templates."):
        remote = parse_templates(text)

    templates = get_templates()

    if not templates:
        with error_context("Could not save the downloaded templates."):
            set_templates(remote)
        return

    if resolve is None:
        resolve = select(
            "What would you like to do with the existing templates?", list(Resolve)
        )

    if resolve is Resolve.MERGE:
        with error_context("Could not update local templates."):
            set_templates({**templates, **remote})
    elif resolve is Resolve.REPLACE:
        with error_context("Could not save the downloaded templates."):
            set_templates(remote)
    else:
        log.debug("Keeping the local profile templates")
