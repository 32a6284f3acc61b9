"""Link and doctor commands."""

import typer

from ..api.link.cmd_doctor import cmd_doctor
from ..api.link.cmd_link import cmd_link
from ._config_options import _config_options
from ._handle_stage_result import _handle_stage_result
from ._print_report import _print_report


def link_cmd(ctx: typer.Context) -> None:
    """Create symlinks defined in config."""
    _handle_stage_result(cmd_link, result_printer=_print_report)(**_config_options(ctx))


def doctor_cmd(ctx: typer.Context) -> None:
    """Check health of all symlinks (never modifies anything)."""
    _handle_stage_result(cmd_doctor, result_printer=_print_report)(**_config_options(ctx))
