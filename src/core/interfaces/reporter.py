"""Reporting contract for progress and diagnostic lines.

Fetchers never print. They hand each line to a `Reporter` tagged with a
`Severity`; the CLI renders it on the console and tests record it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.severity import Severity


@runtime_checkable
class Reporter(Protocol):
    """Minimal contract for a line sink.

    Rules:
    - `report` is synchronous and must not raise.
    - Lines arrive interleaved from concurrent fetches, in completion order.
    """

    def report(self, severity: Severity, message: str) -> None:
        """Deliver one line at the given severity."""

        ...


def info(reporter: Reporter, message: str) -> None:
    reporter.report(Severity.INFO, message)


def warning(reporter: Reporter, message: str) -> None:
    reporter.report(Severity.WARNING, message)


def error(reporter: Reporter, message: str) -> None:
    reporter.report(Severity.ERROR, message)
