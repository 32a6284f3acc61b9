"""Create or replace the symlink for an expanded link."""

import os

from ...utils.get_logger import get_logger
from ..config.ExpandedLink import ExpandedLink
from .CreateResult import CreateResult

logger = get_logger("link.create_link")


def create_link(link: ExpandedLink) -> CreateResult:
    """Converge link.destination toward a symlink pointing at link.source.

    An existing destination (a dangling symlink included) is left alone
    unless link.force is set, in which case it is removed first; only
    files, symlinks and empty directories can be removed. Missing parent
    directories are created on a best-effort basis. The source is stored
    verbatim as the symlink target and need not exist; if it does not, the
    result is CREATED_BROKEN. Filesystem errors, and paths the OS rejects
    outright (an embedded NUL byte), yield FAILED. Nothing is rolled back
    on failure.
    """
    if os.path.lexists(link.destination):
        if not link.force:
            logger.debug(f"Skipping existing destination {link.destination}")
            return CreateResult.SKIPPED
        try:
            _remove(link.destination)
        except (OSError, ValueError) as e:
            logger.warning(f"Cannot remove {link.destination}: {e}")
            return CreateResult.FAILED
        logger.info(f"Removed existing {link.destination}")

    parent = os.path.dirname(link.destination)
    if parent:
        try:
            os.makedirs(parent, exist_ok=True)
        except (OSError, ValueError) as e:
            # Symlink creation below reports the real failure
            logger.debug(f"Cannot create parent directory {parent}: {e}")

    try:
        os.symlink(link.source, link.destination)
    except (OSError, ValueError) as e:
        logger.warning(f"Cannot create symlink {link.destination} -> {link.source}: {e}")
        return CreateResult.FAILED

    if not os.path.exists(link.source):
        logger.warning(f"Created {link.destination} -> {link.source}, but the source does not exist")
        return CreateResult.CREATED_BROKEN

    logger.info(f"Created {link.destination} -> {link.source}")
    return CreateResult.CREATED


def _remove(path: str) -> None:
    """Remove a file or symlink, falling back to rmdir for a directory."""
    try:
        os.unlink(path)
    except IsADirectoryError:
        os.rmdir(path)
    except PermissionError:
        # unlink() on a directory is EPERM on macOS
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            raise
