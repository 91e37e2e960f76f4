"""Tests for trace loading and result rendering helpers."""

import plotly.graph_objects as go
import pytest

from engine import ReplacementPolicy, simulate
from utils import (
    EMPTY_COLOR,
    HIT_COLOR,
    MISS_COLOR,
    Colors,
    build_comparison_figure,
    build_history_figure,
    build_outcome_figure,
    compare_policies,
    format_accesses,
    format_table,
    generate_trace,
    get_color,
    parse_trace,
)

BELADY = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]


# -- Trace loading --------------------------------------------------------------


class TestParseTrace:
    """Verify reference string parsing."""

    def test_whitespace_separated(self) -> None:
        """Spaces, tabs and newlines all separate pages."""
        assert parse_trace("1 2\t3\n4") == [1, 2, 3, 4]

    def test_comma_separated(self) -> None:
        """Commas work like in the web form."""
        assert parse_trace("0, 1,2 ,3") == [0, 1, 2, 3]

    def test_blank_is_empty(self) -> None:
        """No tokens means an empty trace."""
        assert parse_trace("   ") == []

    def test_invalid_token(self) -> None:
        """Non-integers are rejected before simulation."""
        with pytest.raises(ValueError, match="'x'"):
            parse_trace("1 x 3")


class TestGenerateTrace:
    """Verify random reference strings."""

    def test_length_and_range(self) -> None:
        """Pages stay inside 0..max_page."""
        trace = generate_trace(50, max_page=4, seed=3)
        assert len(trace) == 50
        assert all(0 <= page <= 4 for page in trace)

    def test_seed_is_reproducible(self) -> None:
        """The same seed gives the same trace."""
        assert generate_trace(20, seed=11) == generate_trace(20, seed=11)

    def test_negative_length(self) -> None:
        """Negative lengths are rejected."""
        with pytest.raises(ValueError):
            generate_trace(-1)


def test_compare_policies() -> None:
    """Every policy is run on the same trace."""
    stats = compare_policies(3, BELADY)
    assert list(stats) == list(ReplacementPolicy.ALL)
    assert [stats[name]["faults"] for name in ReplacementPolicy.ALL] == [9, 10, 7]


# -- Terminal rendering -----------------------------------------------------------


class TestTerminalRendering:
    """Verify the text output used by the command line."""

    def test_plain_accesses(self) -> None:
        """Without color the outcome line is just the pages."""
        results = simulate(ReplacementPolicy.LRU, 3, [1, 2, 1]).results
        assert format_accesses(results, color=False) == "1 2 1"

    def test_colored_accesses(self) -> None:
        """Hits are green and misses red."""
        results = simulate(ReplacementPolicy.LRU, 3, [1, 1]).results
        expected = f"{Colors.RED}1{Colors.END} {Colors.GREEN}1{Colors.END}"
        assert format_accesses(results) == expected

    def test_table(self) -> None:
        """Empty cells stay blank and columns share one width."""
        table = format_table([[1, 10], [None, 2]])
        assert table.splitlines() == [
            "+----+----+",
            "| 1  | 10 |",
            "+----+----+",
            "|    | 2  |",
            "+----+----+",
        ]

    def test_table_without_frames(self) -> None:
        """Zero frames renders nothing."""
        assert format_table([]) == ""

    def test_get_color(self) -> None:
        """Hit and miss colors differ."""
        assert get_color(True) == HIT_COLOR
        assert get_color(False) == MISS_COLOR


# -- Plotly figures ---------------------------------------------------------------


class TestFigures:
    """Verify the figures shown by the web visualizer."""

    def test_outcome_figure(self) -> None:
        """One colored column per access."""
        results = simulate(ReplacementPolicy.FIFO, 3, [1, 1, 2]).results
        fig = build_outcome_figure(results)
        table = fig.data[0]
        assert isinstance(table, go.Table)
        assert [list(col) for col in table.cells.values] == [["1"], ["1"], ["2"]]
        assert [list(col) for col in table.cells.fill.color] == [[MISS_COLOR], [HIT_COLOR], [MISS_COLOR]]

    def test_history_figure(self) -> None:
        """Frame labels first, then one column per step."""
        policy = simulate(ReplacementPolicy.FIFO, 2, [1, 2, 1])
        table = build_history_figure(policy).data[0]
        values = [list(col) for col in table.cells.values]
        assert values == [["F0", "F1"], ["1", ""], ["1", "2"], ["1", "2"]]
        assert list(table.header.values) == ["Frame", "1", "2", "1"]
        fills = [list(col) for col in table.cells.fill.color]
        assert fills[1] == [MISS_COLOR, EMPTY_COLOR]
        assert fills[3] == [HIT_COLOR, EMPTY_COLOR]

    def test_comparison_figure(self) -> None:
        """Hits and faults bars for every policy."""
        fig = build_comparison_figure(compare_policies(3, BELADY))
        hits, faults = fig.data
        assert list(hits.x) == list(ReplacementPolicy.ALL)
        assert list(faults.y) == [9, 10, 7]
        assert list(hits.y) == [3, 2, 5]
