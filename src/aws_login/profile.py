"""Manage access to profile templates stored in a file.

Templates are named collections of AWS CLI settings. A template may extend
another template, inheriting any settings it does not define itself. The
templates are resolved into profiles that are ready to be installed into the
AWS CLI.

Usage:
    templates = get_templates()
    profiles = get_profiles()
    profile = resolve_template("dev", templates)
"""

from pathlib import Path
from typing import Any, BinaryIO, Dict, Optional, Union

from pydantic import ValidationError

from .config import get_templates_file
from .core.errors import AppError, error_context
from .core.logging import get_logger
from .models import TEMPLATES_ADAPTER, Profile, Profiles, Template, Templates

log = get_logger("profile")


def convert_value(value: Any) -> str:
    """Convert a scalar JSON value into an AWS CLI setting value."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    raise AppError(
        1, "The JSON encoded values of array or object type are not supported."
    )


def _merge_settings(settings: Dict[str, str], name: str, template: Template) -> None:
    # Settings already present came from a closer template and are kept.
    for key, value in template.settings.items():
        if key in settings:
            continue
        try:
            settings[key] = convert_value(value)
        except AppError as error:
            raise error.with_context(
                f"Could not convert the setting, {key}, of the profile template, {name}."
            )


def resolve_template(name: str, templates: Templates) -> Profile:
    """Resolve a template and its ancestors into a profile.

    The template is merged with every template up its ``extends`` chain.
    A setting defined by a template is never replaced by one of its
    ancestors.

    Raises:
        AppError: The template or one of its ancestors does not exist, the
            chain contains a cycle, or a setting is an array or object.
    """
    current = templates.get(name)
    if current is None:
        raise AppError(1, f"The profile template, {name}, does not exist.")

    settings: Dict[str, str] = {}
    visited = {name}
    current_name = name

    while True:
        _merge_settings(settings, current_name, current)

        parent = current.extends
        if parent is None:
            break
        if parent in visited:
            raise AppError(
                1,
                f"The profile template, {name}, has a cycle in its extends chain at, {parent}.",
            )
        visited.add(parent)

        current = templates.get(parent)
        if current is None:
            raise AppError(
                1, f"The profile template, {name}, extends, {parent}, which does not exist."
            )
        current_name = parent

    return Profile(name=name, settings=settings)


def process_templates(templates: Templates, include_disabled: bool = False) -> Profiles:
    """Resolve every enabled template (or all of them) into profiles."""
    profiles: Profiles = {}

    for name, template in templates.items():
        if not (template.enabled or include_disabled):
            log.debug("Skipping disabled profile template %s", name)
            continue
        profiles[name] = resolve_template(name, templates)

    return profiles


def parse_templates(data: Union[bytes, str, BinaryIO]) -> Templates:
    """Parse a JSON document into a collection of templates."""
    if hasattr(data, "read"):
        data = data.read()

    try:
        return TEMPLATES_ADAPTER.validate_json(data)
    except ValidationError as error:
        raise AppError(1, str(error)) from error


def get_templates(path: Optional[Path] = None) -> Templates:
    """Read the templates file.

    A missing file is treated as an empty collection.
    """
    path = Path(path) if path else get_templates_file()

    with error_context(f"Could not read the profile templates from: {path}"):
        if not path.exists():
            log.debug("No profile templates found at %s", path)
            return {}

        log.debug("Reading profile templates from %s", path)
        with path.open("rb") as file:
            return parse_templates(file)


def set_templates(templates: Templates, path: Optional[Path] = None) -> None:
    """Write the templates to the templates file."""
    path = Path(path) if path else get_templates_file()

    log.debug("Writing %d profile templates to %s", len(templates), path)

    with error_context(f"Could not write the profile templates to: {path}"):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(TEMPLATES_ADAPTER.dump_json(templates, indent=2) + b"\n")


def get_profiles(path: Optional[Path] = None, include_disabled: bool = False) -> Profiles:
    """Read the templates file and resolve the templates into profiles."""
    return process_templates(get_templates(path), include_disabled)
