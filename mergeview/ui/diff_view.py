# mergeview/ui/diff_view.py
# Rich rendering of DiffLine records, hunks & stats

from __future__ import annotations

from typing import Iterable, Optional

from rich.markup import escape

from .rich_components import Group, RenderableType, Text, Table, themed_panel, themed_table
from ..core.constants import DiffLineKind, FileCategory
from ..core.file_category import classify_file
from ..core.types import DiffLine, DiffHunk, DiffStats

_MARKERS = {
    DiffLineKind.CONTEXT: " ",
    DiffLineKind.ADDITION: "+",
    DiffLineKind.DELETION: "-",
    DiffLineKind.HEADER: "",
}

_STYLES = {
    DiffLineKind.CONTEXT: "diff.context",
    DiffLineKind.ADDITION: "diff.addition",
    DiffLineKind.DELETION: "diff.deletion",
    DiffLineKind.HEADER: "diff.header",
}

_CATEGORY_LABELS = {
    FileCategory.CODE: "code",
    FileCategory.DOCUMENT: "doc",
    FileCategory.GENERIC: "file",
}


def format_line_number(num: Optional[int], width: int = 4) -> str:
    if num is None:
        return " " * width
    return str(num).rjust(width)


# * Title for a file view, tagged w/ its display category
def file_title(file_name: str) -> str:
    return f"{escape(file_name)} ({_CATEGORY_LABELS[classify_file(file_name)]})"


def render_diff_line(line: DiffLine) -> Text:
    if line.kind == DiffLineKind.HEADER:
        return Text(line.content, style=_STYLES[line.kind])
    return Text(_MARKERS[line.kind] + line.content, style=_STYLES[line.kind])


# * Table w/ old/new line number gutters & styled content
def render_diff_table(lines: Iterable[DiffLine], line_numbers: bool = True) -> Table:
    table = themed_table(expand=True)
    if line_numbers:
        table.add_column(justify="right", style="diff.lineno", no_wrap=True)
        table.add_column(justify="right", style="diff.lineno", no_wrap=True)
    table.add_column(ratio=1, overflow="fold")

    for line in lines:
        cells: list[RenderableType] = []
        if line_numbers:
            cells.append(format_line_number(line.old_line_number))
            cells.append(format_line_number(line.new_line_number))
        cells.append(render_diff_line(line))
        table.add_row(*cells)
    return table


def render_stats(stats: DiffStats) -> Text:
    text = Text()
    text.append(f"+{stats.additions}", style="diff.addition")
    text.append(" ")
    text.append(f"-{stats.deletions}", style="diff.deletion")
    text.append(f"  ({stats.total} changed lines)", style="dim")
    return text


# * One panel per hunk, titled w/ the hunk header
def render_hunks(hunks: list[DiffHunk], line_numbers: bool = True) -> RenderableType:
    if not hunks:
        return Text("No hunks found", style="dim")
    panels = [
        themed_panel(render_diff_table(h.lines, line_numbers), title=escape(h.header))
        for h in hunks
    ]
    return Group(*panels)
