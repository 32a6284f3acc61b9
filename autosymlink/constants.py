"""Shared constants for autosymlink file locations and display."""

APP_NAME = "autosymlink"

CONFIG_FILENAME = "config.json"  # default config file inside the config dir
ALIASES_FILENAME = "aliases.json"  # optional aliases file next to the config
LOG_FILENAME = "autosymlink.log"

# Alias values are resolved recursively up to this many nested references
MAX_RESOLUTION_DEPTH = 32

# Alias and config files larger than this are refused
MAX_FILE_SIZE = 1024 * 1024
