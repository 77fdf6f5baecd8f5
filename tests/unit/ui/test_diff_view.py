# tests/unit/ui/test_diff_view.py
# Unit tests for diff table, hunk & stats rendering

from mergeview.core.diff_parser import parse_hunks
from mergeview.core.line_diff import compute_positional_diff
from mergeview.core.types import DiffLine, DiffStats
from mergeview.ui.diff_view import (
    file_title,
    format_line_number,
    render_diff_line,
    render_diff_table,
    render_hunks,
    render_stats,
)

from test_support.rich_capture import render_plain


class TestFormatting:

    # * Verify line numbers are right aligned & blank when absent
    def test_format_line_number(self):

        assert format_line_number(7) == "   7"
        assert format_line_number(None) == "    "

    # * Verify title carries the file category
    def test_file_title(self):

        assert file_title("main.py") == "main.py (code)"
        assert file_title("README.md") == "README.md (doc)"
        assert file_title("logo.png") == "logo.png (file)"

    # * Verify bracketed names are escaped for markup
    def test_file_title_escapes(self):

        assert "\\[" in file_title("[draft].txt")

    # * Verify line markers & styles
    def test_render_diff_line(self):

        addition = render_diff_line(DiffLine.addition("x", 1))
        deletion = render_diff_line(DiffLine.deletion("y", 1))
        header = render_diff_line(DiffLine.header("@@ -1 +1 @@"))

        assert addition.plain == "+x"
        assert str(addition.style) == "diff.addition"
        assert deletion.plain == "-y"
        assert header.plain == "@@ -1 +1 @@"


class TestRendering:

    # * Verify the table shows gutters & content
    def test_diff_table(self):

        output = render_plain(render_diff_table(compute_positional_diff("a\nb", "a\nc")))

        assert "-b" in output
        assert "+c" in output
        assert "2" in output

    # * Verify gutters can be hidden
    def test_diff_table_without_numbers(self):

        table = render_diff_table([DiffLine.context("x", 1, 1)], line_numbers=False)

        assert len(table.columns) == 1

    # * Verify one panel per hunk titled by its header
    def test_hunks(self):

        hunks = parse_hunks("@@ -1 +1 @@\n-a\n+b\n@@ -5 +5 @@\n x")
        output = render_plain(render_hunks(hunks))

        assert "@@ -1 +1 @@" in output
        assert "@@ -5 +5 @@" in output

    # * Verify empty hunk list message
    def test_no_hunks(self):

        assert "No hunks found" in render_plain(render_hunks([]))

    # * Verify stats summary
    def test_stats(self):

        output = render_plain(render_stats(DiffStats(additions=2, deletions=1)))

        assert "+2 -1" in output
        assert "3 changed lines" in output
