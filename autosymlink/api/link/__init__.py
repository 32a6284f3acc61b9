"""Link API domain: inspect and create symlinks."""

from .check_link import check_link
from .create_link import create_link
from .CreateResult import CreateResult
from .LinkStatus import LinkStatus
from .read_link_target import read_link_target

__all__ = ["CreateResult", "LinkStatus", "check_link", "create_link", "read_link_target"]
