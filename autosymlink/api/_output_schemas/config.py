"""Output schemas for config commands."""

from pydantic import BaseModel, Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ExpandedLinkOutput(BaseModel):
    source: str = Field(..., description="Expanded source path")
    destination: str = Field(..., description="Expanded destination path")
    force: bool = Field(..., description="Replace an existing destination")


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    Links whose paths cannot be expanded are omitted from ``links`` and
    reported in ``warnings``.
    """

    config_path: str = Field(..., description="Path to the configuration file, empty string if it could not be located")
    aliases_path: str = Field(..., description="Path to the aliases file, empty string if it could not be located")
    aliases: dict[str, str] = Field(..., description="Resolved alias namespace")
    links: list[ExpandedLinkOutput] = Field(..., description="Expanded links in declaration order")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "version", ConfigVersionOutput)
