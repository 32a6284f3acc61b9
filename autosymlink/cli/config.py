"""Config Typer app factory."""

import typer

from ..api.config.cmd_show import cmd_show
from ..api.config.cmd_version import cmd_version
from ._config_options import _config_options
from ._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Inspect configuration",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show the resolved configuration (same as `config show`)."""
        if ctx.invoked_subcommand is None:
            _handle_stage_result(cmd_show)(**_config_options(ctx))

    @app.command(name="show")
    def show_cmd(ctx: typer.Context) -> None:
        """Show resolved aliases and expanded links."""
        _handle_stage_result(cmd_show)(**_config_options(ctx))

    @app.command(name="version")
    def version_cmd() -> None:
        """Show version information."""
        _handle_stage_result(cmd_version)()

    return app
