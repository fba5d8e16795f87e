"""CLI UI components (Rich).

Keeps rendering details (styles, wrapping, colour detection) out of the
command logic. Colour is emitted only when the console supports it.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.text import Text

from core.config import APP_VERSION
from core.domain.severity import Severity

_SEVERITY_STYLES: dict[Severity, str] = {
    Severity.INFO: "",
    Severity.WARNING: "yellow",
    Severity.ERROR: "bold red",
}


class ConsoleReporter:
    """`Reporter` that writes each line to a Rich console, styled by severity.

    API payloads are echoed verbatim: no markup parsing, no highlighting and
    no wrapping.
    """

    def __init__(self, console: Console) -> None:
        self._console = console

    def report(self, severity: Severity, message: str) -> None:
        style = _SEVERITY_STYLES.get(severity, "")
        self._console.print(Text(message, style=style), soft_wrap=True, highlight=False, emoji=False)


def usage_text() -> str:
    return (
        f"getsinks {APP_VERSION}.\n"
        "\n"
        "Usage: getsinks <access token>\n"
        "\n"
        'One way to retrieve a GCP access token is to run: "gcloud auth application-default print-access-token"'
    )


def print_usage(console: Console) -> None:
    console.print(usage_text(), markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_lines(console: Console, lines: Iterable[str]) -> None:
    """Write pre-formatted lines as-is (the sink table)."""

    for line in lines:
        console.out(line, highlight=False)
