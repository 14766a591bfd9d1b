"""Pydantic models for profile templates and resolved profiles."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, TypeAdapter


class Template(BaseModel):
    """An unprocessed profile template as read from the templates file."""

    model_config = ConfigDict(frozen=True)

    enabled: StrictBool = Field(True, description="Offer the template as a profile")
    extends: Optional[str] = Field(None, description="Name of the parent template")
    settings: Dict[str, Any] = Field(
        default_factory=dict, description="AWS CLI settings as JSON values"
    )


class Profile(BaseModel):
    """A processed profile template ready to be installed into the AWS CLI."""

    name: str
    settings: Dict[str, str] = Field(default_factory=dict)

    def __str__(self) -> str:
        return self.name

    def __lt__(self, other: "Profile") -> bool:
        return self.name < other.name


# A named collection of templates.
Templates = Dict[str, Template]

# A named collection of resolved profiles.
Profiles = Dict[str, Profile]

TEMPLATES_ADAPTER = TypeAdapter(Templates)
