"""Report API domain: per-link status lines and outcome counts."""

from .DoctorReport import DoctorReport
from .LinkReport import LinkReport
from .Report import Report
from .ReportTag import ReportTag

__all__ = ["DoctorReport", "LinkReport", "Report", "ReportTag"]
