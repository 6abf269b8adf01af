"""
test_diff.py - pretty diff rendering
"""

import time

from golden_files.core.diff import (
    ANSI_DELETE,
    ANSI_INSERT,
    ANSI_RESET,
    compute_diff,
    pretty_diff,
    render_pretty,
)
from golden_files.domain.schemas import DiffOp, DiffSegment


def _side(segments: list[DiffSegment], skip: DiffOp) -> str:
    return "".join(s.text for s in segments if s.op is not skip)


class TestComputeDiff:
    """compute_diff."""

    def test_equal_texts(self):
        assert compute_diff("a\nb\n", "a\nb\n") == [DiffSegment(DiffOp.EQUAL, "a\nb\n")]

    def test_empty_texts(self):
        assert compute_diff("", "") == []

    def test_inserted_line(self):
        segments = compute_diff("a\nc\n", "a\nb\nc\n")

        assert segments == [
            DiffSegment(DiffOp.EQUAL, "a\n"),
            DiffSegment(DiffOp.INSERT, "b\n"),
            DiffSegment(DiffOp.EQUAL, "c\n"),
        ]

    def test_deleted_line(self):
        segments = compute_diff("a\nb\nc\n", "a\nc\n")

        assert DiffSegment(DiffOp.DELETE, "b\n") in segments

    def test_changed_line_refined_to_characters(self):
        """Only the changed characters are marked."""
        segments = compute_diff('"Bar": "hello world"\n', '"Bar": "hello there"\n')

        assert segments[0].op is DiffOp.EQUAL
        assert segments[0].text.startswith('"Bar": "hello ')
        changed = "".join(s.text for s in segments if s.op is not DiffOp.EQUAL)
        assert "hello" not in changed

    def test_sides_reconstruct(self):
        """EQUAL+DELETE = expected, EQUAL+INSERT = actual."""
        expected = '{\n  "id": "1",\n  "name": "a"\n}'
        actual = '{\n  "id": "2",\n  "name": "a",\n  "extra": true\n}'

        segments = compute_diff(expected, actual)

        assert _side(segments, DiffOp.INSERT) == expected
        assert _side(segments, DiffOp.DELETE) == actual

    def test_adjacent_segments_merged(self):
        segments = compute_diff("x", "y")
        ops = [s.op for s in segments]
        assert len(ops) == len(set(ops))


class TestRenderPretty:
    """render_pretty / pretty_diff."""

    def test_color(self):
        segments = [
            DiffSegment(DiffOp.EQUAL, "a"),
            DiffSegment(DiffOp.DELETE, "b"),
            DiffSegment(DiffOp.INSERT, "c"),
        ]

        assert render_pretty(segments) == f"a{ANSI_DELETE}b{ANSI_RESET}{ANSI_INSERT}c{ANSI_RESET}"

    def test_plain(self):
        segments = [
            DiffSegment(DiffOp.EQUAL, "a"),
            DiffSegment(DiffOp.DELETE, "b"),
            DiffSegment(DiffOp.INSERT, "c"),
        ]

        assert render_pretty(segments, color=False) == "a[-b-]{+c+}"

    def test_pretty_diff_plain(self):
        assert pretty_diff("same\nold\n", "same\nnew\n", color=False) == "same\n[-old-]{+new+}\n"

    def test_no_difference(self):
        assert pretty_diff("x", "x") == "x"


class TestLargeBlocks:
    """Character refinement is bounded."""

    def test_long_single_lines_diffed_quickly(self):
        """Two different 20k-character lines → one delete + one insert."""
        expected = "ab" * 10_000
        actual = "ba" * 10_000

        start = time.perf_counter()
        segments = compute_diff(expected, actual)

        assert time.perf_counter() - start < 2
        assert segments == [
            DiffSegment(DiffOp.DELETE, expected),
            DiffSegment(DiffOp.INSERT, actual),
        ]

    def test_limit_is_configurable(self):
        segments = compute_diff("hello world", "hello there", char_limit=5)

        assert [s.op for s in segments] == [DiffOp.DELETE, DiffOp.INSERT]

    def test_short_blocks_still_refined(self):
        segments = compute_diff("x" * 100 + "a", "x" * 100 + "b")

        assert segments[0] == DiffSegment(DiffOp.EQUAL, "x" * 100)
