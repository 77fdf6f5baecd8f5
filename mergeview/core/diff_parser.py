# mergeview/core/diff_parser.py
# Unified diff text -> DiffLine records, hunk grouping & addition/deletion stats
# * One-pass transliteration of unified diff syntax; never raises on malformed input

from __future__ import annotations

import re
from typing import Iterable, Optional

from .constants import DiffLineKind
from .types import DiffLine, DiffHunk, DiffStats
from .debug import is_debug_enabled, debug_diff


# @@ -<oldStart>[,<oldCount>] +<newStart>[,<newCount>] @@
HUNK_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")

FILE_HEADER_PREFIXES = ("---", "+++")

# starts a new file section in git output; ends any open hunk
FILE_BOUNDARY_PREFIX = "diff --git "


# * Parsed numbers of a hunk header: (old_start, old_count, new_start, new_count)
def parse_hunk_header(line: str) -> Optional[tuple[int, int, int, int]]:
    match = HUNK_HEADER_RE.match(line)
    if match is None:
        return None
    old_start, old_count, new_start, new_count = match.groups()
    # omitted counts mean a single line
    return (
        int(old_start),
        int(old_count) if old_count is not None else 1,
        int(new_start),
        int(new_count) if new_count is not None else 1,
    )


class _HunkBudget:
    # Remaining old/new lines declared by the open hunk header.
    # None means the header could not be read, so the hunk has no known end.

    def __init__(self) -> None:
        self.old: Optional[int] = 0
        self.new: Optional[int] = 0

    def open(self, old: Optional[int], new: Optional[int]) -> None:
        self.old = old
        self.new = new

    def close(self) -> None:
        self.old = 0
        self.new = 0

    @property
    def is_open(self) -> bool:
        if self.old is None or self.new is None:
            return True
        return self.old > 0 or self.new > 0

    def consume(self, old: bool, new: bool) -> None:
        if old and self.old:
            self.old -= 1
        if new and self.new:
            self.new -= 1


# * Convert unified diff text into renderable line records
def parse_unified_diff(diff_text: str) -> list[DiffLine]:
    lines: list[DiffLine] = []
    old_line_num = 1
    new_line_num = 1
    budget = _HunkBudget()

    for raw in diff_text.split("\n"):
        if raw.startswith("@@"):
            numbers = parse_hunk_header(raw)
            if numbers is not None:
                old_line_num, old_count, new_line_num, new_count = numbers
                budget.open(old_count, new_count)
            else:
                budget.open(None, None)
            lines.append(DiffLine.header(raw))
            continue

        if raw.startswith(FILE_BOUNDARY_PREFIX):
            budget.close()
            continue

        # ---/+++ are file headers unless the open hunk still expects lines
        if raw.startswith(FILE_HEADER_PREFIXES) and not budget.is_open:
            continue

        if raw.startswith("+"):
            lines.append(DiffLine.addition(raw[1:], new_line_num))
            new_line_num += 1
            budget.consume(old=False, new=True)
        elif raw.startswith("-"):
            lines.append(DiffLine.deletion(raw[1:], old_line_num))
            old_line_num += 1
            budget.consume(old=True, new=False)
        elif raw.startswith(" "):
            lines.append(DiffLine.context(raw[1:], old_line_num, new_line_num))
            old_line_num += 1
            new_line_num += 1
            budget.consume(old=True, new=True)

    if is_debug_enabled():
        debug_diff(f"Parsed {len(lines)} diff lines from unified diff")
    return lines


# * Group parsed lines under their @@ headers
def parse_hunks(diff_text: str) -> list[DiffHunk]:
    hunks: list[DiffHunk] = []
    current: Optional[DiffHunk] = None

    for line in parse_unified_diff(diff_text):
        if line.kind == DiffLineKind.HEADER:
            numbers = parse_hunk_header(line.content)
            if numbers is None:
                current = DiffHunk(header=line.content)
            else:
                old_start, old_count, new_start, new_count = numbers
                current = DiffHunk(
                    header=line.content,
                    old_start=old_start,
                    old_lines=old_count,
                    new_start=new_start,
                    new_lines=new_count,
                )
            hunks.append(current)
        elif current is not None:
            current.lines.append(line)

    return hunks


# * Count additions & deletions in a sequence of diff lines
def diff_stats(lines: Iterable[DiffLine]) -> DiffStats:
    additions = 0
    deletions = 0
    for line in lines:
        if line.kind == DiffLineKind.ADDITION:
            additions += 1
        elif line.kind == DiffLineKind.DELETION:
            deletions += 1
    return DiffStats(additions=additions, deletions=deletions)
