"""Link definition."""

from pydantic import BaseModel, ConfigDict, Field


class LinkConfig(BaseModel):
    """Desired symlink at ``destination`` pointing to ``source``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: str = Field(..., min_length=1, description="Symlink target; may contain ${name} and a leading ~")
    destination: str = Field(..., min_length=1, description="Where the symlink is created; may contain ${name} and a leading ~")
    force: bool = Field(False, description="Replace an existing destination")
