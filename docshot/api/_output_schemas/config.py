"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    - section: the section name, empty string when listing all sections
    - content: ``{"sections": [...]}`` when listing, otherwise the section dict
    - config_path: path to the configuration file
    - config_exists: whether the file exists (defaults are used otherwise)
    """

    section: str = Field(..., description="Section name, empty string if listing all sections")
    content: dict[str, Any] = Field(..., description="Section names or the section config dict")
    config_path: str = Field(..., description="Path to the configuration file")
    config_exists: bool = Field(..., description="Whether the configuration file exists")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")


schema_registry.register_output_schema("config", "show", ConfigShowOutput)
schema_registry.register_output_schema("config", "version", ConfigVersionOutput)
