"""Alias API domain: the ${name} variable resolver."""

from .AliasError import AliasError, AliasParseError, InvalidSyntaxError, MaxDepthExceededError, UnknownVariableError
from .Aliases import Aliases
from .Builtin import Builtin

__all__ = [
    "AliasError",
    "AliasParseError",
    "Aliases",
    "Builtin",
    "InvalidSyntaxError",
    "MaxDepthExceededError",
    "UnknownVariableError",
]
