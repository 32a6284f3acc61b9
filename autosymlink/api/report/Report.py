"""Base class for per-link report aggregation."""

from abc import ABC, abstractmethod
from typing import Any

from .ReportTag import TAG_WIDTH, ReportTag


class Report(ABC):
    """Collect one formatted line per link and keep running counts.

    Subclasses define the counter names (in summary order) and how each
    outcome maps to a tag, message and counter.
    """

    counters: tuple[str, ...] = ()

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.entries: list[dict[str, Any]] = []
        self.counts: dict[str, int] = {name: 0 for name in self.counters}

    @property
    def total(self) -> int:
        return len(self.entries)

    @property
    @abstractmethod
    def success(self) -> bool:
        """True when the run counts as successful."""

    def summary(self) -> str:
        return ", ".join(f"{self.counts[name]} {name}" for name in self.counters)

    def render(self) -> str:
        """Report lines, a blank line and the summary, newline terminated."""
        return "".join(f"{line}\n" for line in self.lines) + f"\n{self.summary()}\n"

    def to_output(self) -> dict[str, Any]:
        return {
            "links": list(self.entries),
            "counts": dict(self.counts),
            "report": list(self.lines),
            "summary": self.summary(),
        }

    def _record(
        self,
        tag: ReportTag,
        counter: str,
        outcome: str,
        source: str,
        destination: str,
        message: str,
    ) -> str:
        line = f"{tag.value:<{TAG_WIDTH}} {message}"
        self.lines.append(line)
        self.counts[counter] += 1
        self.entries.append(
            {
                "source": source,
                "destination": destination,
                "outcome": outcome,
                "tag": tag.value,
                "message": message,
            }
        )
        return line
