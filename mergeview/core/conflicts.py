# mergeview/core/conflicts.py
# Conflict resolution tracking: active pointers, per-section resolution & changeset metrics
# * Lookup misses are silent no-ops; nothing in this module raises

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from .constants import Resolution
from .types import ConflictFile, ConflictSection, ResolutionProgress
from .debug import is_debug_enabled, debug_conflict


# callback signatures for host notifications
ResolutionChangedCallback = Callable[[str, Optional[Resolution]], None]
FinalizeCallback = Callable[[list[ConflictFile]], None]
CancelCallback = Callable[[], None]


# * Effective merged text for a section under its current resolution
def render_resolution(section: ConflictSection) -> str:
    if section.resolution == Resolution.USE_CURRENT:
        return section.current_content
    if section.resolution == Resolution.USE_INCOMING:
        return section.incoming_content
    if section.resolution == Resolution.USE_BOTH:
        return f"{section.current_content}\n{section.incoming_content}"
    if section.resolution == Resolution.MANUAL:
        return section.manual_content or ""
    return ""


# * Sum of section counts across a changeset
def total_conflicts(files: list[ConflictFile]) -> int:
    return sum(len(f.conflicts) for f in files)


# * Sum of resolved sections across a changeset
def resolved_conflicts(files: list[ConflictFile]) -> int:
    return sum(f.resolved_count for f in files)


# * Controller state: the changeset plus the active file/section identifiers
@dataclass
class ResolutionState:

    files: list[ConflictFile] = field(default_factory=list)
    active_path: Optional[str] = None
    active_section_id: Optional[str] = None

    @property
    def active_file(self) -> Optional[ConflictFile]:
        if self.active_path is None:
            return None
        return find_file(self.files, self.active_path)

    @property
    def active_section(self) -> Optional[ConflictSection]:
        active = self.active_file
        if active is None or self.active_section_id is None:
            return None
        return active.find_section(self.active_section_id)


# * Find a file by path in a changeset
def find_file(files: list[ConflictFile], path: str) -> Optional[ConflictFile]:
    for conflict_file in files:
        if conflict_file.path == path:
            return conflict_file
    return None


class ConflictResolutionManager:
    # Drives selection & resolution over a ResolutionState.
    # Holds no data of its own beyond the state and the host callbacks.

    def __init__(
        self,
        state: ResolutionState,
        on_resolution_changed: ResolutionChangedCallback | None = None,
        on_finalize: FinalizeCallback | None = None,
        on_cancel: CancelCallback | None = None,
    ):
        self.state = state
        self.on_resolution_changed = on_resolution_changed
        self.on_finalize = on_finalize
        self.on_cancel = on_cancel

    @classmethod
    def for_files(cls, files: list[ConflictFile], **callbacks) -> "ConflictResolutionManager":
        return cls(ResolutionState(files=files), **callbacks)

    @property
    def files(self) -> list[ConflictFile]:
        return self.state.files

    # ===== SELECTION =====

    def select_file(self, path: str) -> None:
        target = find_file(self.state.files, path)
        if target is None:
            self.state.active_path = None
            self.state.active_section_id = None
            return

        self.state.active_path = target.path
        self.state.active_section_id = target.conflicts[0].id if target.conflicts else None

    def select_section(self, section_id: str) -> None:
        active = self.state.active_file
        section = active.find_section(section_id) if active is not None else None
        self.state.active_section_id = section.id if section is not None else None

    def select_next_section(self) -> None:
        # wraps within the active file; no-op w/o an active file
        active = self.state.active_file
        if active is None or not active.conflicts:
            return
        ids = [s.id for s in active.conflicts]
        if self.state.active_section_id not in ids:
            self.state.active_section_id = ids[0]
            return
        index = ids.index(self.state.active_section_id)
        self.state.active_section_id = ids[(index + 1) % len(ids)]

    def select_next_file(self) -> None:
        if not self.state.files:
            return
        paths = [f.path for f in self.state.files]
        if self.state.active_path not in paths:
            self.select_file(paths[0])
            return
        index = paths.index(self.state.active_path)
        self.select_file(paths[(index + 1) % len(paths)])

    # ===== RESOLUTION =====

    def resolve(
        self,
        section_id: str,
        resolution: Optional[Resolution],
        manual_content: str | None = None,
    ) -> None:
        active = self.state.active_file
        if active is None:
            return
        section = active.find_section(section_id)
        if section is None:
            return

        self._apply(section, resolution, manual_content)

        if is_debug_enabled():
            debug_conflict(
                f"{active.path}#{section_id} -> {resolution.value if resolution else 'unresolved'} "
                f"({active.resolved_count}/{len(active.conflicts)} resolved)"
            )

    def resolve_all(self, resolution: Resolution, path: str | None = None) -> None:
        # apply one strategy across a file (or the whole changeset); ignores active pointers
        if path is None:
            targets = self.state.files
        else:
            target = find_file(self.state.files, path)
            targets = [target] if target is not None else []

        for conflict_file in targets:
            for section in conflict_file.conflicts:
                self._apply(section, resolution, None)

        if is_debug_enabled():
            debug_conflict(
                f"Resolved {sum(len(f.conflicts) for f in targets)} sections as {resolution.value}"
            )

    def _apply(
        self,
        section: ConflictSection,
        resolution: Optional[Resolution],
        manual_content: str | None,
    ) -> None:
        section.resolution = resolution
        # omitted manual text keeps whatever was there before
        if resolution == Resolution.MANUAL and manual_content is not None:
            section.manual_content = manual_content
        if self.on_resolution_changed is not None:
            self.on_resolution_changed(section.id, resolution)

    # ===== METRICS =====

    def can_finalize(self) -> bool:
        return all(f.resolved for f in self.state.files)

    def progress(self) -> ResolutionProgress:
        return ResolutionProgress(
            resolved_count=resolved_conflicts(self.state.files),
            total_count=total_conflicts(self.state.files),
        )

    # ===== HOST SIGNALS =====

    def request_finalize(self) -> bool:
        if not self.can_finalize():
            return False
        if self.on_finalize is not None:
            self.on_finalize(self.state.files)
        return True

    def request_cancel(self) -> None:
        self.state.active_path = None
        self.state.active_section_id = None
        if self.on_cancel is not None:
            self.on_cancel()
