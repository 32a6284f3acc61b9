"""Link command - create all symlinks from config.

CLI: autosymlink link
"""

from collections.abc import Iterator

from ...utils.get_logger import get_logger
from ..alias.AliasError import AliasError
from ..config.ConfigError import ConfigError
from ..config.expand_link import expand_link
from ..report.LinkReport import LinkReport
from ..StageResult import StageResult
from ._load_for_command import _load_for_command
from .create_link import create_link

logger = get_logger("link.cmd_link")


def cmd_link(config_path: str | None = None, aliases_path: str | None = None) -> StageResult:
    """Create the symlinks defined in the config, one link at a time in declaration order.

    Per-link failures are reported and counted; they never stop the batch.
    The command fails if any link failed.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        report = LinkReport()

        yield (0.0, "Loading configuration...")
        loaded = _load_for_command(result_obj, report, config_path, aliases_path)
        if loaded is None:
            return

        total = len(loaded.links)
        for index, raw in enumerate(loaded.links):
            yield (index / total, f"Linking {raw.destination}...")
            try:
                link = expand_link(raw, loaded.aliases)
            except (AliasError, ConfigError, ValueError) as e:
                report.add_error(raw.source, raw.destination, str(e))
                continue
            report.add_result(link, create_link(link))

        yield (1.0, "Complete")
        logger.info(f"link: {report.summary()}")
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "config_path": str(loaded.config_path),
            **report.to_output(),
        }
        result_obj.result = report.summary()
        result_obj.success = report.success

    return StageResult(announce="Creating symlinks...", progress_callback=do_work)
