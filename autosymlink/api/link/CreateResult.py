"""Outcome of a link creation attempt."""

from enum import Enum


class CreateResult(str, Enum):
    CREATED = "created"
    CREATED_BROKEN = "created-broken"  # symlink made, but the source does not exist
    SKIPPED = "skipped"  # destination exists and force is off
    FAILED = "failed"
