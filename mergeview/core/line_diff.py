# mergeview/core/line_diff.py
# Line diffs between two full texts: positional (index-aligned) & matched (difflib)

from __future__ import annotations

import difflib

from .constants import DIFF_MATCHED
from .types import DiffLine
from .debug import is_debug_enabled, debug_diff


# * Split text into lines on "\n" only (empty text is one empty line)
def split_lines(text: str) -> list[str]:
    return text.split("\n")


# * Compare two texts line by line at equal indexes.
# * Not an edit-distance diff: one inserted line shifts every later comparison,
# * so every subsequent line registers as changed.
def compute_positional_diff(old_text: str, new_text: str) -> list[DiffLine]:
    old_lines = split_lines(old_text)
    new_lines = split_lines(new_text)
    max_lines = max(len(old_lines), len(new_lines))

    result: list[DiffLine] = []
    for i in range(max_lines):
        number = i + 1
        has_old = i < len(old_lines)
        has_new = i < len(new_lines)
        # absent counts as "" for comparison & content
        old_line = old_lines[i] if has_old else ""
        new_line = new_lines[i] if has_new else ""

        if old_line == new_line:
            result.append(DiffLine.context(old_line, number, number))
        elif has_old and not has_new:
            result.append(DiffLine.deletion(old_line, number))
        elif has_new and not has_old:
            result.append(DiffLine.addition(new_line, number))
        else:
            result.append(DiffLine.deletion(old_line, number))
            result.append(DiffLine.addition(new_line, number))

    if is_debug_enabled():
        debug_diff(
            f"Positional diff: {len(old_lines)} old / {len(new_lines)} new lines -> {len(result)} rows",
        )
    return result


# * Compare two texts using difflib's longest-matching-block alignment
def compute_matched_diff(old_text: str, new_text: str) -> list[DiffLine]:
    old_lines = split_lines(old_text)
    new_lines = split_lines(new_text)
    matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)

    result: list[DiffLine] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            for offset in range(i2 - i1):
                result.append(
                    DiffLine.context(old_lines[i1 + offset], i1 + offset + 1, j1 + offset + 1)
                )
            continue

        # replace emits all deletions before additions
        if tag in ("delete", "replace"):
            for i in range(i1, i2):
                result.append(DiffLine.deletion(old_lines[i], i + 1))
        if tag in ("insert", "replace"):
            for j in range(j1, j2):
                result.append(DiffLine.addition(new_lines[j], j + 1))

    if is_debug_enabled():
        debug_diff(f"Matched diff: {len(result)} rows")
    return result


# * Dispatch to the named diff algorithm (positional unless "matched")
def compute_diff(old_text: str, new_text: str, algorithm: str) -> list[DiffLine]:
    if algorithm == DIFF_MATCHED:
        return compute_matched_diff(old_text, new_text)
    return compute_positional_diff(old_text, new_text)
