"""Pydantic models for aws-login."""

from .template import Template, Profile, Templates, Profiles, TEMPLATES_ADAPTER

__all__ = [
    "Template",
    "Profile",
    "Templates",
    "Profiles",
    "TEMPLATES_ADAPTER",
]
