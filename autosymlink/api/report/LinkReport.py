"""Report for the link command."""

from ..config.ExpandedLink import ExpandedLink
from ..link.CreateResult import CreateResult
from .Report import Report
from .ReportTag import ReportTag

# result -> (tag, counter, message suffix)
_RESULTS: dict[CreateResult, tuple[ReportTag, str, str]] = {
    CreateResult.CREATED: (ReportTag.OK, "created", ""),
    CreateResult.CREATED_BROKEN: (ReportTag.BROKEN, "created", " (source does not exist)"),
    CreateResult.SKIPPED: (ReportTag.SKIP, "skipped", " (destination exists, use force: true)"),
    CreateResult.FAILED: (ReportTag.FAIL, "failed", ""),
}


class LinkReport(Report):
    """Tally create results; the run fails if any link failed."""

    counters = ("created", "skipped", "failed")

    @property
    def success(self) -> bool:
        return self.counts["failed"] == 0

    def add_result(self, link: ExpandedLink, result: CreateResult) -> str:
        tag, counter, suffix = _RESULTS[result]
        return self._record(
            tag,
            counter,
            result.value,
            link.source,
            link.destination,
            f"{link.source} -> {link.destination}{suffix}",
        )

    def add_error(self, source: str, destination: str, reason: str) -> str:
        """Record a link that could not be attempted (e.g. its paths did not expand)."""
        return self._record(
            ReportTag.FAIL,
            "failed",
            "error",
            source,
            destination,
            f"{source} -> {destination} (error: {reason})",
        )
