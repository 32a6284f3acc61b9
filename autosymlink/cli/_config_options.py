"""Read the global config options stored by the main callback."""

import typer


def _config_options(ctx: typer.Context) -> dict[str, str | None]:
    """Return config_path/aliases_path keyword arguments for API commands."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return {
        "config_path": obj.get("config_path"),
        "aliases_path": obj.get("aliases_path"),
    }
