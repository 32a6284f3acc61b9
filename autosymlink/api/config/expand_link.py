"""Expand both paths of a link definition."""

from ..alias.Aliases import Aliases
from .expand_path import expand_path
from .ExpandedLink import ExpandedLink
from .LinkConfig import LinkConfig


def expand_link(link: LinkConfig, aliases: Aliases) -> ExpandedLink:
    """Expand source and destination of link exactly once.

    Raises:
        AliasError: If a path cannot be interpolated
        HomeNotSetError: If a path starts with ~ and HOME is not set
        ValueError: If a path expands to the empty string
    """
    source = expand_path(link.source, aliases)
    destination = expand_path(link.destination, aliases)
    if not source:
        raise ValueError(f"source {link.source!r} expands to an empty path")
    if not destination:
        raise ValueError(f"destination {link.destination!r} expands to an empty path")
    return ExpandedLink(source=source, destination=destination, force=link.force)
