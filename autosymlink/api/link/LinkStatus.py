"""Health of a link on disk."""

from enum import Enum


class LinkStatus(str, Enum):
    OK = "ok"
    BROKEN = "broken"  # symlink to the right target, but the source is missing
    MISSING = "missing"  # destination does not exist
    NOT_A_SYMLINK = "not-a-symlink"  # destination exists but is not a symlink
    WRONG_TARGET = "wrong-target"  # symlink points somewhere else
