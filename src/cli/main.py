"""getsinks command line.

Lists the Cloud Logging sinks of every organization, folder and project the
given access token can see, as an aligned text table.

Exit codes:
- 0: at least one sink found and printed.
- 1: wrong number of arguments, a fatal error while fetching, or no sinks
  at all ("nothing to export" is something the operator should act on).
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from cli.ui_components import ConsoleReporter, print_lines, print_usage
from core.config import AppSettings
from core.formatting import render_sink_table
from core.interfaces.reporter import error
from core.services.sink_pipeline import collect_sinks

app = typer.Typer(
    add_completion=False,
    help="List Cloud Logging sinks across organizations, folders and projects.",
)

_console = Console()


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    args: list[str] | None = typer.Argument(
        None,
        metavar="ACCESS_TOKEN",
        help="OAuth2 access token, used as-is as the Bearer credential.",
        show_default=False,
    ),
    max_concurrency: int | None = typer.Option(
        None,
        "--max-concurrency",
        min=1,
        help="Cap on in-flight sink requests (default: unbounded, or GETSINKS_MAX_CONCURRENCY).",
    ),
) -> None:
    """List every logging sink visible to ACCESS_TOKEN."""

    if not args or len(args) != 1:
        print_usage(_console)
        raise typer.Exit(code=1)

    access_token = args[0]
    reporter = ConsoleReporter(_console)

    try:
        settings = AppSettings()
        if max_concurrency is not None:
            settings = settings.model_copy(update={"max_concurrency": max_concurrency})
        sinks = asyncio.run(
            collect_sinks(settings=settings, access_token=access_token, reporter=reporter)
        )
    except Exception as exc:
        error(reporter, f"Couldn't get sinks: {exc}")
        raise typer.Exit(code=1) from None

    if not sinks:
        _console.print("No sinks found.", markup=False, highlight=False, emoji=False)
        raise typer.Exit(code=1)

    _console.print(f"Got {len(sinks)} sinks.", markup=False, highlight=False, emoji=False)
    print_lines(_console, render_sink_table(sinks))


def run() -> None:
    app()
