"""Read the recorded target of a symlink."""

import os


def read_link_target(path: str) -> str:
    """Return the target string stored in the symlink at path.

    Raises:
        OSError: If path is not a symlink or cannot be read
    """
    return os.readlink(path)
