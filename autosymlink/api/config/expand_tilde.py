"""Expand a leading ~ to the home directory."""

from collections.abc import Mapping

from .get_home import get_home


def expand_tilde(path: str, environ: Mapping[str, str] | None = None) -> str:
    """Replace a leading ``~`` (exactly ``~`` or ``~/...``) with $HOME.

    Other forms such as ``~otheruser`` and paths without a leading ``~`` are
    returned unchanged; HOME is only read when a replacement is needed.

    Raises:
        HomeNotSetError: If the path needs HOME and it is not set
    """
    if path == "~" or path.startswith("~/"):
        return get_home(environ) + path[1:]
    return path
