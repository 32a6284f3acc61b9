"""Print a link/doctor report in text mode."""

import typer


def _print_report(output: dict) -> None:
    """Write one line per link, a blank line and the summary to stdout.

    Nothing is printed when no links were processed (configuration error).
    """
    if not output.get("summary"):
        return
    for line in output["report"]:
        typer.echo(line)
    typer.echo("")
    typer.echo(output["summary"])
