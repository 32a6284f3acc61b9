"""Config API domain: config loading and path expansion."""

from .ConfigError import ConfigError, ConfigFileNotFoundError, ConfigParseError, HomeNotSetError
from .ExpandedLink import ExpandedLink
from .LinkConfig import LinkConfig

__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "ExpandedLink",
    "HomeNotSetError",
    "LinkConfig",
]
