"""Top-level autosymlink configuration file."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import MAX_FILE_SIZE
from .ConfigError import ConfigFileNotFoundError, ConfigParseError
from .LinkConfig import LinkConfig


class AutosymlinkConfig(BaseModel):
    """Links to manage plus inline alias definitions, in declaration order."""

    model_config = ConfigDict(extra="forbid")

    links: list[LinkConfig]
    aliases: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "AutosymlinkConfig":
        """Load and validate config from file.

        Raises:
            ConfigFileNotFoundError: If the file does not exist
            ConfigParseError: If the file is not JSON or fails validation
        """
        try:
            with path.open("rb") as fh:
                content = fh.read(MAX_FILE_SIZE + 1)
        except FileNotFoundError as e:
            raise ConfigFileNotFoundError(str(path)) from e
        except IsADirectoryError as e:
            raise ConfigParseError(str(path), "is a directory") from e
        if len(content) > MAX_FILE_SIZE:
            raise ConfigParseError(str(path), f"file exceeds {MAX_FILE_SIZE} bytes")

        try:
            raw = json.loads(content)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigParseError(str(path), f"invalid JSON: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigParseError(str(path), "expected a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigParseError(str(path), detail) from e
