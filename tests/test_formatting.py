from __future__ import annotations

import pytest

from core.domain.models import Sink
from core.formatting import (
    HEADER,
    column_widths,
    compare_rows,
    format_rows,
    render_sink_table,
    sort_rows,
    truncate_filter,
)


def _sink(node_name: str, node_id: str, name: str, destination: str = "dest", filter: str = "f") -> Sink:
    return Sink(node_id=node_id, node_name=node_name, name=name, destination=destination, filter=filter)


@pytest.mark.parametrize("length", [0, 1, 19, 20])
def test_truncate_filter_keeps_short_filters(length: int) -> None:
    text = "x" * length

    assert truncate_filter(text) == text


def test_truncate_filter_cuts_long_filters() -> None:
    text = "abcdefghijklmnopqrstu"  # 21 characters

    result = truncate_filter(text)

    assert result == "abcdefghijklmnopq..."
    assert len(result) == 20


def test_compare_rows_ignores_case() -> None:
    assert compare_rows(["alpha", "y"], ["Zeta", "x"]) < 0
    assert compare_rows(["Zeta", "x"], ["alpha", "y"]) > 0
    assert compare_rows(["ABC"], ["abc"]) == 0


def test_compare_rows_prefix_sorts_first() -> None:
    assert compare_rows(["a", "b"], ["A", "B", "c"]) < 0
    assert compare_rows(["a", "b", "c"], ["a", "b"]) > 0


def test_sort_rows_falls_through_to_later_columns() -> None:
    rows = [["b", "1"], ["A", "2"], ["a", "1"]]

    assert sort_rows(rows) == [["a", "1"], ["A", "2"], ["b", "1"]]


def test_sort_rows_case_insensitive_example() -> None:
    assert sort_rows([["Zeta", "x"], ["alpha", "y"]]) == [["alpha", "y"], ["Zeta", "x"]]


def test_column_widths_cover_every_row() -> None:
    rows = [("a", "bb"), ("cccc", "d"), ("e", "ffffff")]

    assert column_widths(rows) == [4, 6]
    assert column_widths([]) == []


def test_format_rows_pads_and_trims() -> None:
    lines = format_rows([("a", "bb", "c"), ("dddd", "e", "")])

    assert lines == ["a     bb  c", "dddd  e"]


def test_render_sink_table_header_first_and_sorted() -> None:
    sinks = [
        _sink("zeta", "projects/2", "s1"),
        _sink("Alpha", "organizations/1", "s2", filter="severity>=ERROR AND resource.type=gce_instance"),
        _sink("beta", "folders/3", "s3"),
    ]

    lines = render_sink_table(sinks)

    assert len(lines) == 4
    assert lines[0].split() == list(HEADER)
    assert [line.split()[0] for line in lines[1:]] == ["Alpha", "beta", "zeta"]
    assert "severity>=ERROR A..." in lines[1]
    assert all(line == line.rstrip() for line in lines)


def test_render_sink_table_columns_are_aligned() -> None:
    sinks = [
        _sink("a-very-long-display-name", "organizations/1", "sink"),
        _sink("short", "projects/123456789", "another-sink"),
    ]

    lines = render_sink_table(sinks)

    node_id_column = lines[0].index("NodeId")
    assert node_id_column == len("a-very-long-display-name") + 2
    assert lines[1][node_id_column:].startswith("organizations/1")
    assert lines[2][node_id_column:].startswith("projects/123456789")


def test_render_sink_table_without_sinks_is_header_only() -> None:
    assert render_sink_table([]) == ["NodeName  NodeId  SinkName  Destination  Filter"]
