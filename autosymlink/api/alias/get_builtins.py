"""Collect values for the built-in aliases."""

import socket
from collections.abc import Mapping

from ...utils.get_logger import get_logger
from .Builtin import Builtin

logger = get_logger("alias.get_builtins")


def get_builtins(environ: Mapping[str, str], hostname: str | None = None) -> dict[str, str]:
    """Return the built-in aliases that have a value.

    ``_home`` and ``_user`` come from HOME and USER, ``_hostname`` from the
    machine hostname unless one is passed in. Built-ins without a value are
    left out of the result.
    """
    values: dict[str, str] = {}

    home = environ.get("HOME")
    if home is not None:
        values[Builtin.HOME.value] = home

    user = environ.get("USER")
    if user is not None:
        values[Builtin.USER.value] = user

    if hostname is None:
        try:
            hostname = socket.gethostname()
        except OSError as e:
            logger.debug(f"Hostname unavailable: {e}")
    if hostname:
        values[Builtin.HOSTNAME.value] = hostname

    return values
