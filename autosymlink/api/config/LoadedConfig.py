"""Configuration ready for link processing."""

from dataclasses import dataclass
from pathlib import Path

from ..alias.Aliases import Aliases
from .LinkConfig import LinkConfig


@dataclass(frozen=True)
class LoadedConfig:
    """Raw link definitions plus the resolved alias namespace.

    The namespace is read-only after loading; links are expanded per link
    by the commands so one bad path does not abort the batch.
    """

    config_path: Path
    aliases_path: Path
    links: list[LinkConfig]
    aliases: Aliases
