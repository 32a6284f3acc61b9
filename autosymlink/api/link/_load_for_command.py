"""Shared config loading for link commands."""

from ...utils.get_logger import get_logger
from ..alias.AliasError import AliasError
from ..config.ConfigError import ConfigError
from ..config.load_config import load_config
from ..config.LoadedConfig import LoadedConfig
from ..report.Report import Report
from ..StageResult import StageResult

logger = get_logger("link._load_for_command")


def _load_for_command(
    result_obj: StageResult,
    report: Report,
    config_path: str | None,
    aliases_path: str | None,
) -> LoadedConfig | None:
    """Load config for a link command.

    On a configuration-level error, fill result_obj with a failed,
    schema-conformant output and return None.
    """
    try:
        return load_config(config_path, aliases_path)
    except (ConfigError, AliasError) as e:
        logger.error(f"Configuration error: {e}")
        result_obj.output = {
            "errors": [str(e)],
            "warnings": [],
            "config_path": config_path or "",
            **report.to_output(),
            "summary": "",
        }
        result_obj.result = f"Configuration error: {e}"
        result_obj.success = False
        return None
