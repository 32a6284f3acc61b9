"""Create the main Typer CLI app."""

import logging

import typer

from ..utils.configure_logging import configure_logging
from ..utils.get_package_version import get_package_version
from ._handle_stage_result import DISPLAY_FORMATS
from .config import config
from .link import doctor_cmd, link_cmd


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="autosymlink - Symlink manager based on config file",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.command(name="link")(link_cmd)
    app.command(name="doctor")(doctor_cmd)
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        config_path: str | None = typer.Option(
            None,
            "--config",
            "-c",
            help="Config file path (default: ~/.config/autosymlink/config.json)",
        ),
        aliases_path: str | None = typer.Option(
            None,
            "--aliases",
            help="Aliases file path (default: aliases.json next to the config file)",
        ),
        display: str = typer.Option("text", "--display", "-d", help="Output format: text, json or yaml"),
        quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the report and errors"),
        verbose: bool = typer.Option(False, "--verbose", help="Write debug messages to the log file"),
        version: bool = typer.Option(False, "--version", "-v", help="Show version"),
    ) -> None:
        if version:
            typer.echo(f"autosymlink {get_package_version()}")
            raise typer.Exit()

        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be one of {', '.join(DISPLAY_FORMATS)}, got '{display}'", err=True)
            raise typer.Exit(2)

        configure_logging(level=logging.DEBUG if verbose else logging.INFO)

        ctx.ensure_object(dict)
        ctx.obj["config_path"] = config_path
        ctx.obj["aliases_path"] = aliases_path
        ctx.obj["display_format"] = display
        ctx.obj["quiet"] = quiet

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
