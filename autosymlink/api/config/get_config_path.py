"""Get path to the autosymlink config file."""

import os
from collections.abc import Mapping
from pathlib import Path

from ...constants import APP_NAME, CONFIG_FILENAME
from .ConfigError import HomeNotSetError


def get_config_path(environ: Mapping[str, str] | None = None) -> Path:
    """Get the default config path.

    Uses $XDG_CONFIG_HOME/autosymlink/config.json, falling back to
    $HOME/.config/autosymlink/config.json.

    Raises:
        HomeNotSetError: If neither XDG_CONFIG_HOME nor HOME is set
    """
    env = os.environ if environ is None else environ
    xdg_config = env.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / APP_NAME / CONFIG_FILENAME
    home = env.get("HOME")
    if home is None:
        raise HomeNotSetError()
    return Path(home) / ".config" / APP_NAME / CONFIG_FILENAME
