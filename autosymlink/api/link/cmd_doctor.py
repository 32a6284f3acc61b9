"""Doctor command - check the health of all symlinks from config.

CLI: autosymlink doctor
"""

from collections.abc import Iterator

from ...utils.get_logger import get_logger
from ..alias.AliasError import AliasError
from ..config.ConfigError import ConfigError
from ..config.expand_link import expand_link
from ..report.DoctorReport import DoctorReport
from ..StageResult import StageResult
from ._load_for_command import _load_for_command
from .check_link import check_link
from .LinkStatus import LinkStatus
from .read_link_target import read_link_target

logger = get_logger("link.cmd_doctor")


def cmd_doctor(config_path: str | None = None, aliases_path: str | None = None) -> StageResult:
    """Inspect every configured link without modifying anything.

    The command succeeds only if every link is ok.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        report = DoctorReport()

        yield (0.0, "Loading configuration...")
        loaded = _load_for_command(result_obj, report, config_path, aliases_path)
        if loaded is None:
            return

        total = len(loaded.links)
        for index, raw in enumerate(loaded.links):
            yield (index / total, f"Checking {raw.destination}...")
            try:
                link = expand_link(raw, loaded.aliases)
                status = check_link(link)
            except (AliasError, ConfigError, ValueError, OSError) as e:
                report.add_error(raw.source, raw.destination, str(e))
                continue

            actual_target = None
            if status is LinkStatus.WRONG_TARGET:
                try:
                    actual_target = read_link_target(link.destination)
                except OSError as e:
                    logger.debug(f"Cannot read target of {link.destination}: {e}")
            report.add_status(link, status, actual_target)

        yield (1.0, "Complete")
        logger.info(f"doctor: {report.summary()}")
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "config_path": str(loaded.config_path),
            **report.to_output(),
        }
        result_obj.result = report.summary()
        result_obj.success = report.success

    return StageResult(announce="Checking symlinks...", progress_callback=do_work)
