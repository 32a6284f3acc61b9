"""Status tags printed at the start of each report line."""

from enum import Enum


class ReportTag(str, Enum):
    OK = "[OK]"
    SKIP = "[SKIP]"
    FAIL = "[FAIL]"
    ERROR = "[ERROR]"
    BROKEN = "[BROKEN]"
    MISSING = "[MISSING]"
    CONFLICT = "[CONFLICT]"
    WRONG = "[WRONG]"


TAG_WIDTH = max(len(tag.value) for tag in ReportTag)
