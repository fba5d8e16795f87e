"""Plain-text table rendering for sinks.

The table is emitted as plain lines (no box drawing) so it can be piped to
`grep`, `sort` or `column` without stripping decorations.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, Sequence

from core.domain.models import Sink

HEADER: tuple[str, ...] = ("NodeName", "NodeId", "SinkName", "Destination", "Filter")

FILTER_WIDTH = 20
_ELLIPSIS = "..."
_COLUMN_SEPARATOR = "  "


def truncate_filter(text: str, width: int = FILTER_WIDTH) -> str:
    """Shorten `text` to at most `width` characters, marking the cut with `...`."""

    if len(text) <= width:
        return text
    return text[: width - len(_ELLIPSIS)] + _ELLIPSIS


def sink_row(sink: Sink) -> list[str]:
    return [
        sink.node_name,
        sink.node_id,
        sink.name,
        sink.destination,
        truncate_filter(sink.filter),
    ]


def compare_rows(left: Sequence[str], right: Sequence[str]) -> int:
    """Ordinal, case-insensitive, column-by-column comparison.

    When every shared column is equal the shorter row sorts first.
    """

    for a, b in zip(left, right):
        a_key, b_key = a.upper(), b.upper()
        if a_key < b_key:
            return -1
        if a_key > b_key:
            return 1
    if len(left) < len(right):
        return -1
    if len(left) > len(right):
        return 1
    return 0


def sort_rows(rows: Iterable[Sequence[str]]) -> list[Sequence[str]]:
    return sorted(rows, key=cmp_to_key(compare_rows))


def column_widths(rows: Sequence[Sequence[str]]) -> list[int]:
    """Widest cell per column; the first row fixes the number of columns."""

    if not rows:
        return []

    widths = [0] * len(rows[0])
    for row in rows:
        for col, cell in enumerate(row[: len(widths)]):
            widths[col] = max(widths[col], len(cell))
    return widths


def format_rows(rows: Sequence[Sequence[str]]) -> list[str]:
    widths = column_widths(rows)
    lines: list[str] = []
    for row in rows:
        cells = [cell.ljust(widths[col]) if col < len(widths) else cell for col, cell in enumerate(row)]
        lines.append(_COLUMN_SEPARATOR.join(cells).rstrip())
    return lines


def render_sink_table(sinks: Iterable[Sink]) -> list[str]:
    """Header plus one sorted, aligned line per sink."""

    rows = sort_rows(sink_row(sink) for sink in sinks)
    return format_rows([HEADER, *rows])
