"""Get the user's home directory from the environment."""

import os
from collections.abc import Mapping

from .ConfigError import HomeNotSetError


def get_home(environ: Mapping[str, str] | None = None) -> str:
    """Return $HOME.

    Raises:
        HomeNotSetError: If HOME is not set
    """
    env = os.environ if environ is None else environ
    home = env.get("HOME")
    if home is None:
        raise HomeNotSetError()
    return home
