# mergeview/core/conflict_markers.py
# Build ConflictFiles from <<<<<<< / ||||||| / ======= / >>>>>>> marker blocks & preview merged text

from __future__ import annotations

from enum import Enum
from typing import Optional

from .constants import (
    MARKER_START,
    MARKER_BASE,
    MARKER_SEPARATOR,
    MARKER_END,
    DEFAULT_MARKER_SIZE,
    Resolution,
)
from .conflicts import render_resolution
from .types import ConflictFile, ConflictSection
from .debug import is_debug_enabled, debug_conflict


class _Region(Enum):
    OUTSIDE = "outside"
    CURRENT = "current"
    BASE = "base"
    INCOMING = "incoming"


# * True if line opens w/ exactly `size` repetitions of `char`
def is_marker(line: str, char: str, size: int = DEFAULT_MARKER_SIZE) -> bool:
    if not line.startswith(char * size):
        return False
    return len(line) == size or line[size] != char


# * True if the text contains at least one conflict start marker
def has_conflict_markers(text: str, marker_size: int = DEFAULT_MARKER_SIZE) -> bool:
    return any(is_marker(line, MARKER_START, marker_size) for line in text.split("\n"))


# * Parse conflict marker blocks into sections (1-based marker line ranges).
# * Unterminated blocks are dropped; a start marker inside a block restarts it.
def parse_conflict_markers(
    text: str, path: str, marker_size: int = DEFAULT_MARKER_SIZE
) -> ConflictFile:
    sections: list[ConflictSection] = []
    region = _Region.OUTSIDE
    start_index = 0
    current: list[str] = []
    base: Optional[list[str]] = None
    incoming: list[str] = []

    for index, line in enumerate(text.split("\n")):
        if is_marker(line, MARKER_START, marker_size):
            region = _Region.CURRENT
            start_index = index
            current, base, incoming = [], None, []
            continue

        if region == _Region.OUTSIDE:
            continue

        if region == _Region.CURRENT and is_marker(line, MARKER_BASE, marker_size):
            region = _Region.BASE
            base = []
        elif region in (_Region.CURRENT, _Region.BASE) and is_marker(
            line, MARKER_SEPARATOR, marker_size
        ):
            region = _Region.INCOMING
        elif region == _Region.INCOMING and is_marker(line, MARKER_END, marker_size):
            sections.append(
                ConflictSection(
                    id=f"conflict-{len(sections) + 1}",
                    start_line=start_index + 1,
                    end_line=index + 1,
                    current_content="\n".join(current),
                    incoming_content="\n".join(incoming),
                    base_content="\n".join(base) if base is not None else None,
                )
            )
            region = _Region.OUTSIDE
        elif region == _Region.CURRENT:
            current.append(line)
        elif region == _Region.BASE and base is not None:
            base.append(line)
        elif region == _Region.INCOMING:
            incoming.append(line)

    if is_debug_enabled():
        debug_conflict(f"{path}: found {len(sections)} conflict sections")
    return ConflictFile(path=path, conflicts=sections)


# * Split a marker block's lines into its current & incoming side lines.
# * Returns None when the block no longer opens & closes w/ markers.
def _block_sides(
    block: list[str], marker_size: int
) -> Optional[tuple[list[str], list[str]]]:
    if len(block) < 2 or not (
        is_marker(block[0], MARKER_START, marker_size)
        and is_marker(block[-1], MARKER_END, marker_size)
    ):
        return None
    current: list[str] = []
    incoming: list[str] = []
    region = _Region.CURRENT
    for line in block[1:-1]:
        if region == _Region.CURRENT and is_marker(line, MARKER_BASE, marker_size):
            region = _Region.BASE
        elif region in (_Region.CURRENT, _Region.BASE) and is_marker(
            line, MARKER_SEPARATOR, marker_size
        ):
            region = _Region.INCOMING
        elif region == _Region.CURRENT:
            current.append(line)
        elif region == _Region.INCOMING:
            incoming.append(line)
    return current, incoming


# * Lines that replace a resolved block; side choices keep the block's own lines
# * so an empty side & a single blank line stay distinct
def _resolved_lines(
    section: ConflictSection, block: list[str], marker_size: int
) -> list[str]:
    sides = _block_sides(block, marker_size)
    if sides is not None and section.resolution is not Resolution.MANUAL:
        current, incoming = sides
        if section.resolution is Resolution.USE_CURRENT:
            return current
        if section.resolution is Resolution.USE_INCOMING:
            return incoming
        return current + incoming
    rendered = render_resolution(section)
    return rendered.split("\n") if rendered else []


# * Replace each resolved section's line range w/ its resolved lines.
# * Unresolved sections & out-of-range sections are left verbatim; empty manual text renders as no lines.
def apply_resolutions(
    text: str, conflict_file: ConflictFile, marker_size: int = DEFAULT_MARKER_SIZE
) -> str:
    lines = text.split("\n")
    ordered = sorted(conflict_file.conflicts, key=lambda s: s.start_line, reverse=True)

    for section in ordered:
        if not section.is_resolved:
            continue
        start = section.start_line - 1
        end = section.end_line
        if start < 0 or end > len(lines) or start >= end:
            continue
        lines[start:end] = _resolved_lines(section, lines[start:end], marker_size)

    return "\n".join(lines)
