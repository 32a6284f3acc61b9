"""Configuration-level errors. Any of these aborts a command before links are processed."""


class ConfigError(Exception):
    """Base class for configuration-level failures."""


class ConfigFileNotFoundError(ConfigError):
    """Raised when the config file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Config file not found: {path}")


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid JSON or fails validation."""

    def __init__(self, path: str, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to parse config file {path}: {detail}")


class HomeNotSetError(ConfigError):
    """Raised when HOME is needed but not set."""

    def __init__(self) -> None:
        super().__init__("HOME environment variable not set")
