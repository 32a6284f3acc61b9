"""Classify the on-disk state of an expanded link."""

import os
import stat

from ..config.ExpandedLink import ExpandedLink
from .LinkStatus import LinkStatus


def check_link(link: ExpandedLink) -> LinkStatus:
    """Classify the destination against the desired symlink without changing anything.

    The destination is inspected with lstat so a symlink is never followed.
    A recorded target that differs from the source is WRONG_TARGET even if
    that other path exists; the source is only checked once the target matches.

    Raises:
        OSError: If lstat fails for any reason other than the destination not existing
    """
    try:
        st = os.lstat(link.destination)
    except FileNotFoundError:
        return LinkStatus.MISSING

    if not stat.S_ISLNK(st.st_mode):
        return LinkStatus.NOT_A_SYMLINK

    try:
        target = os.readlink(link.destination)
    except OSError:
        return LinkStatus.BROKEN

    if target != link.source:
        return LinkStatus.WRONG_TARGET

    if not os.path.exists(link.source):
        return LinkStatus.BROKEN

    return LinkStatus.OK
