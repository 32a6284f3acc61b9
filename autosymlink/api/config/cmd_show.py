"""Config show command - resolved aliases and expanded links.

CLI: autosymlink config show
"""

from collections.abc import Iterator

from ..alias.AliasError import AliasError
from ..StageResult import StageResult
from .ConfigError import ConfigError
from .expand_link import expand_link
from .load_config import load_config


def cmd_show(config_path: str | None = None, aliases_path: str | None = None) -> StageResult:
    """Show the alias namespace and links after expansion."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            loaded = load_config(config_path, aliases_path)
        except (ConfigError, AliasError) as e:
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "config_path": config_path or "",
                "aliases_path": aliases_path or "",
                "aliases": {},
                "links": [],
            }
            result_obj.result = f"Configuration error: {e}"
            result_obj.success = False
            return

        yield (0.6, "Expanding links...")
        links = []
        warnings = []
        for raw in loaded.links:
            try:
                link = expand_link(raw, loaded.aliases)
            except (AliasError, ConfigError, ValueError) as e:
                warnings.append(f"{raw.source} -> {raw.destination}: {e}")
                continue
            links.append({"source": link.source, "destination": link.destination, "force": link.force})

        yield (1.0, "Complete")
        result_obj.output = {
            "errors": [],
            "warnings": warnings,
            "config_path": str(loaded.config_path),
            "aliases_path": str(loaded.aliases_path),
            "aliases": loaded.aliases.to_dict(),
            "links": links,
        }
        result_obj.result = f"Configuration: {len(links)} links, {len(loaded.aliases)} aliases"
        result_obj.success = True

    return StageResult(announce="Loading configuration...", progress_callback=do_work)
