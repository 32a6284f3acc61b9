"""Link definition with aliases and ~ expanded."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExpandedLink:
    source: str
    destination: str
    force: bool = False
