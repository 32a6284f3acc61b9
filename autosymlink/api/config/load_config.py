"""Load the config file and build the resolved alias namespace."""

import os
from collections.abc import Mapping
from pathlib import Path

from ...constants import ALIASES_FILENAME
from ...utils.get_logger import get_logger
from ..alias.Aliases import Aliases, read_aliases_file
from .AutosymlinkConfig import AutosymlinkConfig
from .expand_tilde import expand_tilde
from .get_config_path import get_config_path
from .LoadedConfig import LoadedConfig

logger = get_logger("config.load_config")


def load_config(
    config_path: str | None = None,
    aliases_path: str | None = None,
    environ: Mapping[str, str] | None = None,
    hostname: str | None = None,
) -> LoadedConfig:
    """Load links and aliases.

    The alias namespace is filled in order: built-ins, the aliases file
    (``aliases.json`` next to the config unless given), then the config's
    inline ``aliases``. Later entries shadow earlier ones. All values are
    then resolved once.

    Raises:
        ConfigError: If the config cannot be located, read or validated
        AliasError: If the aliases file is malformed or an alias cannot be resolved
    """
    env = os.environ if environ is None else environ

    if config_path is None:
        resolved_config = get_config_path(env)
    else:
        resolved_config = Path(expand_tilde(config_path, env))

    if aliases_path is None:
        resolved_aliases = resolved_config.parent / ALIASES_FILENAME
    else:
        resolved_aliases = Path(expand_tilde(aliases_path, env))

    logger.info(f"Loading config from {resolved_config}")
    config = AutosymlinkConfig.load(resolved_config)

    aliases = Aliases(environ=env, hostname=hostname)
    aliases.update(read_aliases_file(resolved_aliases))
    aliases.update(config.aliases)
    aliases.resolve_all()

    logger.info(f"Loaded {len(config.links)} links and {len(aliases)} aliases")
    return LoadedConfig(
        config_path=resolved_config,
        aliases_path=resolved_aliases,
        links=list(config.links),
        aliases=aliases,
    )
