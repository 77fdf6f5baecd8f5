# mergeview/core/types.py
# Core data model: diff line records, hunks & conflict sections/files

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .constants import DiffLineKind, Resolution


# * One renderable row of a diff view
@dataclass(frozen=True)
class DiffLine:
    kind: DiffLineKind
    content: str
    old_line_number: Optional[int] = None
    new_line_number: Optional[int] = None

    @classmethod
    def header(cls, content: str) -> "DiffLine":
        return cls(DiffLineKind.HEADER, content)

    @classmethod
    def context(cls, content: str, old: int, new: int) -> "DiffLine":
        return cls(DiffLineKind.CONTEXT, content, old, new)

    @classmethod
    def addition(cls, content: str, new: int) -> "DiffLine":
        return cls(DiffLineKind.ADDITION, content, new_line_number=new)

    @classmethod
    def deletion(cls, content: str, old: int) -> "DiffLine":
        return cls(DiffLineKind.DELETION, content, old_line_number=old)


# * Contiguous block of a unified diff under one @@ header
@dataclass
class DiffHunk:
    header: str
    old_start: int = 0
    old_lines: int = 0
    new_start: int = 0
    new_lines: int = 0
    lines: list[DiffLine] = field(default_factory=list)


# * Addition/deletion counts for a set of diff lines
@dataclass(frozen=True)
class DiffStats:
    additions: int = 0
    deletions: int = 0

    @property
    def total(self) -> int:
        return self.additions + self.deletions


# * One merge conflict hunk within a file
@dataclass
class ConflictSection:
    id: str
    start_line: int
    end_line: int
    current_content: str
    incoming_content: str
    base_content: Optional[str] = None
    resolution: Optional[Resolution] = None
    # only meaningful when resolution is MANUAL
    manual_content: Optional[str] = None

    @property
    def is_resolved(self) -> bool:
        return self.resolution is not None


# * One file under merge; resolved is derived from its sections
@dataclass
class ConflictFile:
    path: str
    conflicts: list[ConflictSection] = field(default_factory=list)

    @property
    def resolved(self) -> bool:
        return all(section.is_resolved for section in self.conflicts)

    @property
    def resolved_count(self) -> int:
        return sum(1 for section in self.conflicts if section.is_resolved)

    def find_section(self, section_id: str) -> Optional[ConflictSection]:
        for section in self.conflicts:
            if section.id == section_id:
                return section
        return None


# * Resolved/total section counts across a changeset
@dataclass(frozen=True)
class ResolutionProgress:
    resolved_count: int
    total_count: int

    @property
    def percent(self) -> float:
        # nothing to resolve counts as done
        if self.total_count == 0:
            return 100.0
        return self.resolved_count / self.total_count * 100

    @property
    def is_complete(self) -> bool:
        return self.resolved_count >= self.total_count
