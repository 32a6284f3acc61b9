import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import APP_NAME, LOG_FILENAME
from .get_state_dir import get_state_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(state_dir: Path | None = None, level: int = logging.INFO) -> None:
    """Configure unified autosymlink logging.

    Args:
        state_dir: Directory for the log file. If None, derived from environment.
        level: Level for the ``autosymlink`` logger.
    """
    global _CONFIGURED
    root_logger = logging.getLogger(APP_NAME)
    root_logger.setLevel(level)
    if _CONFIGURED:
        return

    try:
        if state_dir is None:
            state_dir = get_state_dir()
        state_dir.mkdir(parents=True, exist_ok=True)
        file_handler: logging.Handler = RotatingFileHandler(
            state_dir / LOG_FILENAME,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
    except (OSError, RuntimeError):
        # No writable state dir (or no home at all); logging must not block a run
        file_handler = logging.NullHandler()

    file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def is_configured() -> bool:
    """Return True once configure_logging() has installed a handler."""
    return _CONFIGURED
