"""Built-in alias names."""

from enum import Enum


class Builtin(str, Enum):
    HOME = "_home"
    USER = "_user"
    HOSTNAME = "_hostname"
