"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import click

from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("text", "json", "yaml")


def _context_options() -> tuple[str, bool]:
    """Get (display_format, quiet) from the active Typer/Click context chain.

    Falls back to ("text", False) when no context carries them.
    """
    current: click.Context | None = click.get_current_context(silent=True)
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value not in DISPLAY_FORMATS:
                raise ValueError(f"Invalid display_format value: {value!r}")
            return value, bool(obj.get("quiet", False))
        current = current.parent
    return "text", False


def _handle_stage_result(func: F, result_printer: Callable[[dict], None] | None = None) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout): result_printer in text mode, otherwise JSON/YAML

    The wrapped function exits with 0 on success and 1 on failure.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display_format, quiet = _context_options()
        _run_single_execution(func, args, kwargs, CLIDisplay(), display_format, result_printer, quiet)

    return wrapper  # type: ignore[return-value]
