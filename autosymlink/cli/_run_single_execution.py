"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from typing import TypeVar

from ..api.validate_output import validate_output
from .display.Display import Display

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Display,
    display_format: str,
    result_printer: Callable[[dict], None] | None = None,
    quiet: bool = False,
) -> None:
    """Run command once, display the result and exit.

    Commands must handle all exceptions internally and format errors
    via their domain-specific output schema. Errors are shown even when
    quiet is set.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    if not quiet:
        display.status(result.announce)

    # Stage 2: Progress - progress_callback yields (progress_percent, message) tuples
    for progress_percent, message in result.progress_callback(result):
        if not quiet:
            display.info(f"{message} ({progress_percent:.0%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Validation failure is a programming error - fail loudly
    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        raise ValueError(f"Output structure validation failed: {e}") from e

    # Stage 3: Result
    if result.success:
        if not quiet:
            display.success(result.result)
    else:
        display.error(result.result)

    for warning in result.output.get("warnings", []):
        display.warning(warning)

    # Stage 4: Output - report text, or JSON/YAML based on --display
    if display_format == "text" and result_printer is not None:
        result_printer(result.output)
    else:
        display.json_output(result.output, format="json" if display_format == "json" else "yaml")

    sys.exit(0 if result.success else 1)
