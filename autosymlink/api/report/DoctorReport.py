"""Report for the doctor command."""

from ..config.ExpandedLink import ExpandedLink
from ..link.LinkStatus import LinkStatus
from .Report import Report
from .ReportTag import ReportTag

UNKNOWN_TARGET = "<unknown>"

# status -> (tag, counter)
_STATUSES: dict[LinkStatus, tuple[ReportTag, str]] = {
    LinkStatus.OK: (ReportTag.OK, "ok"),
    LinkStatus.BROKEN: (ReportTag.BROKEN, "broken"),
    LinkStatus.MISSING: (ReportTag.MISSING, "missing"),
    LinkStatus.NOT_A_SYMLINK: (ReportTag.CONFLICT, "conflict"),
    LinkStatus.WRONG_TARGET: (ReportTag.WRONG, "wrong"),
}


class DoctorReport(Report):
    """Tally link health; the run succeeds only if every link is ok."""

    counters = ("ok", "broken", "missing", "wrong", "conflict", "error")

    @property
    def success(self) -> bool:
        return self.counts["ok"] == self.total

    def add_status(self, link: ExpandedLink, status: LinkStatus, actual_target: str | None = None) -> str:
        """Record an inspection result.

        actual_target is shown for WRONG_TARGET links; None prints as <unknown>.
        """
        tag, counter = _STATUSES[status]
        if status is LinkStatus.OK:
            message = f"{link.destination} -> {link.source}"
        elif status is LinkStatus.BROKEN:
            message = f"{link.destination} -> {link.source} (source missing)"
        elif status is LinkStatus.MISSING:
            message = f"{link.destination} (symlink not created)"
        elif status is LinkStatus.NOT_A_SYMLINK:
            message = f"{link.destination} (exists but is not a symlink)"
        else:
            actual = UNKNOWN_TARGET if actual_target is None else actual_target
            message = f"{link.destination} -> {actual} (expected {link.source})"
        return self._record(tag, counter, status.value, link.source, link.destination, message)

    def add_error(self, source: str, destination: str, reason: str) -> str:
        """Record a link whose health could not be determined."""
        return self._record(
            ReportTag.ERROR,
            "error",
            "error",
            source,
            destination,
            f"{destination} -> {source} (could not check: {reason})",
        )
