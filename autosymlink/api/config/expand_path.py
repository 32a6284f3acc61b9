"""Expand a configured path: interpolate aliases, then expand ~."""

from ..alias.Aliases import Aliases
from .expand_tilde import expand_tilde


def expand_path(path: str, aliases: Aliases) -> str:
    """Interpolate ${name} references in path and expand a leading ~.

    An empty path stays empty; callers decide whether that is valid.
    """
    if not path:
        return path
    return expand_tilde(aliases.interpolate(path), aliases.environ)
