"""Get the autosymlink state directory (log files live here)."""

import os
from collections.abc import Mapping
from pathlib import Path

from ..constants import APP_NAME


def get_state_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Get the autosymlink state directory.

    Checks AUTOSYMLINK_STATE_DIR first, then XDG_STATE_HOME, and falls back
    to ~/.local/state/autosymlink.
    """
    env = os.environ if environ is None else environ
    override = env.get("AUTOSYMLINK_STATE_DIR")
    if override:
        return Path(override).expanduser()
    xdg_state = env.get("XDG_STATE_HOME")
    if xdg_state:
        return Path(xdg_state).expanduser() / APP_NAME
    return Path.home() / ".local" / "state" / APP_NAME
