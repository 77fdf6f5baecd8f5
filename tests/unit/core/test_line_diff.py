# tests/unit/core/test_line_diff.py
# Unit tests for positional & matched line diffs

import pytest

from mergeview.core.constants import DiffLineKind, DIFF_MATCHED, DIFF_POSITIONAL
from mergeview.core.line_diff import (
    split_lines,
    compute_positional_diff,
    compute_matched_diff,
    compute_diff,
)
from mergeview.core.types import DiffLine

from conftest import assert_line_numbering

RAGGED = [
    ("", "a\nb"),
    ("a\nb\nc", "a"),
    ("x\n\ny", "\n\n\nz\n"),
    ("a\nb\nc\nd", "b\nd\ne"),
]


def _numbers(lines):
    old = [l.old_line_number for l in lines if l.old_line_number is not None]
    new = [l.new_line_number for l in lines if l.new_line_number is not None]
    return old, new


def _assert_sequential(lines):
    # old & new numbers each count up by one across the rows that carry them
    for numbers in _numbers(lines):
        assert numbers == list(range(1, len(numbers) + 1))


def _assert_index_numbered(lines, old, new):
    # positional rows are numbered by index; numbers only grow
    limit = max(len(old.split("\n")), len(new.split("\n")))
    for numbers in _numbers(lines):
        assert numbers == sorted(set(numbers))
        assert all(1 <= n <= limit for n in numbers)


class TestSplitLines:

    # * Verify splitting on newline only
    def test_newline_only(self):

        assert split_lines("a\r\nb") == ["a\r", "b"]

    # * Verify empty text is a single empty line
    def test_empty_text(self):

        assert split_lines("") == [""]


class TestPositionalDiff:

    # * Verify identical inputs yield one context row per line
    @pytest.mark.parametrize("text", ["", "one", "a\nb\nc", "x\n\ny\n"])
    def test_identical_inputs(self, text):

        lines = compute_positional_diff(text, text)
        count = len(text.split("\n"))

        assert len(lines) == count
        for i, line in enumerate(lines, start=1):
            assert line == DiffLine.context(text.split("\n")[i - 1], i, i)

    # * Verify both empty inputs never fail
    def test_both_empty(self):

        assert compute_positional_diff("", "") == [DiffLine.context("", 1, 1)]

    # * Verify a changed line becomes deletion then addition at the same index
    def test_changed_line(self):

        lines = compute_positional_diff("a\nb", "a\nB")

        assert lines == [
            DiffLine.context("a", 1, 1),
            DiffLine.deletion("b", 2),
            DiffLine.addition("B", 2),
        ]

    # * Verify trailing old lines become deletions
    def test_old_longer(self):

        lines = compute_positional_diff("a\nb\nc", "a")

        assert lines[1:] == [DiffLine.deletion("b", 2), DiffLine.deletion("c", 3)]

    # * Verify trailing new lines become additions
    def test_new_longer(self):

        lines = compute_positional_diff("a", "a\nb")

        assert lines == [DiffLine.context("a", 1, 1), DiffLine.addition("b", 2)]

    # * Verify an absent old line matching an empty new line is context
    def test_absent_matches_empty(self):

        lines = compute_positional_diff("a", "a\n")

        assert lines == [DiffLine.context("a", 1, 1), DiffLine.context("", 2, 2)]

    # * Verify one inserted line shifts every later comparison
    def test_insertion_shifts_alignment(self):

        lines = compute_positional_diff("a\nb\nc", "x\na\nb\nc")
        kinds = [l.kind for l in lines]

        assert DiffLineKind.CONTEXT not in kinds
        assert kinds.count(DiffLineKind.DELETION) == 3
        assert kinds.count(DiffLineKind.ADDITION) == 4

    # * Verify numbering rules hold for ragged inputs
    @pytest.mark.parametrize("old, new", RAGGED)
    def test_line_numbering_rules(self, old, new):

        lines = compute_positional_diff(old, new)

        assert_line_numbering(lines)
        _assert_index_numbered(lines, old, new)


class TestMatchedDiff:

    # * Verify an inserted line does not disturb the lines after it
    def test_insertion_keeps_alignment(self):

        lines = compute_matched_diff("a\nb\nc", "x\na\nb\nc")

        assert lines == [
            DiffLine.addition("x", 1),
            DiffLine.context("a", 1, 2),
            DiffLine.context("b", 2, 3),
            DiffLine.context("c", 3, 4),
        ]

    # * Verify replace emits deletions before additions
    def test_replace_order(self):

        lines = compute_matched_diff("a\nb\nc", "a\nB\nc")

        assert lines == [
            DiffLine.context("a", 1, 1),
            DiffLine.deletion("b", 2),
            DiffLine.addition("B", 2),
            DiffLine.context("c", 3, 3),
        ]

    # * Verify identical inputs are all context
    def test_identical(self):

        lines = compute_matched_diff("a\nb", "a\nb")

        assert all(l.kind == DiffLineKind.CONTEXT for l in lines)
        assert len(lines) == 2

    # * Verify numbering rules hold for ragged inputs
    @pytest.mark.parametrize("old, new", RAGGED)
    def test_line_numbering_rules(self, old, new):

        lines = compute_matched_diff(old, new)

        assert_line_numbering(lines)
        _assert_sequential(lines)


class TestComputeDiff:

    # * Verify dispatch by algorithm name
    def test_dispatch(self):

        old, new = "a\nb", "x\na\nb"

        assert compute_diff(old, new, DIFF_MATCHED) == compute_matched_diff(old, new)
        assert compute_diff(old, new, DIFF_POSITIONAL) == compute_positional_diff(old, new)
