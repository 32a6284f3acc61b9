"""Output schemas for link commands."""

from pydantic import BaseModel, Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkEntryOutput(BaseModel):
    """One processed link."""

    source: str = Field(..., description="Expanded source path (raw path if expansion failed)")
    destination: str = Field(..., description="Expanded destination path (raw path if expansion failed)")
    outcome: str = Field(..., description="Create result, link status, or 'error'")
    tag: str = Field(..., description="Report tag, e.g. [OK]")
    message: str = Field(..., description="Report message without the tag")


class _LinkReportOutput(BaseOutputSchema):
    config_path: str = Field(..., description="Config file that was loaded, empty string if it could not be located")
    links: list[LinkEntryOutput] = Field(..., description="Per-link outcomes in declaration order")
    counts: dict[str, int] = Field(..., description="Number of links per counter")
    report: list[str] = Field(..., description="Formatted report lines, one per link")
    summary: str = Field(..., description="One-line summary of the counts, empty string if no links were processed")


class LinkLinkOutput(_LinkReportOutput):
    """Output schema for the link command."""


class LinkDoctorOutput(_LinkReportOutput):
    """Output schema for the doctor command."""


register_output_schema("link", "link", LinkLinkOutput)
register_output_schema("link", "doctor", LinkDoctorOutput)
