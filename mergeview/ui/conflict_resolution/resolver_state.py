# mergeview/ui/conflict_resolution/resolver_state.py
# View state & transitions for the interactive conflict resolver

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ...core.constants import Resolution
from ...core.conflicts import ConflictResolutionManager, render_resolution
from ...core.debug import is_debug_enabled, debug_conflict


# menu options for the resolver UI
OPTIONS = [
    "Use Current",
    "Use Incoming",
    "Use Both",
    "Manual",
    "Next Section",
    "Next File",
    "Finalize",
    "Cancel",
]

# menu option -> resolution applied to the active section
OPTION_RESOLUTIONS = {
    "Use Current": Resolution.USE_CURRENT,
    "Use Incoming": Resolution.USE_INCOMING,
    "Use Both": Resolution.USE_BOTH,
}

OUTCOME_FINALIZED = "finalized"
OUTCOME_CANCELLED = "cancelled"


# UI state enum for mode transitions
class ResolverMode(Enum):
    MENU = "menu"
    TEXT_INPUT = "text_input"


@dataclass
class ResolverViewState:

    # menu selection
    selected: int = 0

    # mode state
    mode: ResolverMode = ResolverMode.MENU

    # manual text input state (single line)
    text_input_buffer: str = ""
    text_input_cursor: int = 0

    # feedback line shown in the footer
    status_message: Optional[str] = None

    # set once the session ends
    outcome: Optional[str] = None

    @property
    def is_done(self) -> bool:
        return self.outcome is not None


class ResolverStateManager:

    def __init__(self, view: ResolverViewState, manager: ConflictResolutionManager):
        self.view = view
        self.manager = manager

    # ===== MODE TRANSITIONS =====

    def enter_manual_mode(self) -> None:
        section = self.manager.state.active_section
        if section is None:
            return
        # prefill w/ manual text only while the section is manual, else its rendered text
        if section.resolution is Resolution.MANUAL and section.manual_content is not None:
            prefill = section.manual_content
        elif section.resolution is not None:
            prefill = render_resolution(section)
        else:
            prefill = section.current_content
        self.view.mode = ResolverMode.TEXT_INPUT
        self.view.text_input_buffer = prefill
        self.view.text_input_cursor = len(prefill)
        self.view.status_message = None

    def cancel_text_input(self) -> None:
        self.view.mode = ResolverMode.MENU
        self._reset_text_input()

    def submit_manual(self) -> None:
        section_id = self.manager.state.active_section_id
        if section_id is not None:
            self.manager.resolve(section_id, Resolution.MANUAL, self.view.text_input_buffer)
            if is_debug_enabled():
                debug_conflict(
                    f"Manual content set: {self.view.text_input_buffer[:50]}..."
                )
        self.view.mode = ResolverMode.MENU
        self._reset_text_input()
        self.advance_to_next_unresolved()

    # ===== TEXT INPUT OPERATIONS =====

    def insert_char(self, char: str) -> None:
        self.view.text_input_buffer = (
            self.view.text_input_buffer[: self.view.text_input_cursor]
            + char
            + self.view.text_input_buffer[self.view.text_input_cursor :]
        )
        self.view.text_input_cursor += 1

    def delete_before_cursor(self) -> None:
        if self.view.text_input_cursor > 0:
            self.view.text_input_buffer = (
                self.view.text_input_buffer[: self.view.text_input_cursor - 1]
                + self.view.text_input_buffer[self.view.text_input_cursor :]
            )
            self.view.text_input_cursor -= 1

    def move_cursor_left(self) -> None:
        if self.view.text_input_cursor > 0:
            self.view.text_input_cursor -= 1

    def move_cursor_right(self) -> None:
        if self.view.text_input_cursor < len(self.view.text_input_buffer):
            self.view.text_input_cursor += 1

    def _reset_text_input(self) -> None:
        self.view.text_input_buffer = ""
        self.view.text_input_cursor = 0

    # ===== RESOLUTION =====

    def apply_choice(self, resolution: Resolution) -> None:
        section_id = self.manager.state.active_section_id
        if section_id is None:
            self.view.status_message = "No conflict section selected"
            return
        self.manager.resolve(section_id, resolution)
        self.view.status_message = None
        self.advance_to_next_unresolved()

    def advance_to_next_unresolved(self) -> None:
        # next unresolved section after the active one, wrapping across files
        state = self.manager.state
        ordered = [(f.path, s) for f in state.files for s in f.conflicts]
        if not ordered:
            return
        position = next(
            (
                i
                for i, (path, s) in enumerate(ordered)
                if path == state.active_path and s.id == state.active_section_id
            ),
            -1,
        )
        for step in range(1, len(ordered) + 1):
            path, section = ordered[(position + step) % len(ordered)]
            if not section.is_resolved:
                self.manager.select_file(path)
                self.manager.select_section(section.id)
                return

    def next_section(self) -> None:
        self.manager.select_next_section()
        self.view.status_message = None

    def next_file(self) -> None:
        self.manager.select_next_file()
        self.view.status_message = None

    # ===== SESSION END =====

    def finalize(self) -> None:
        if self.manager.request_finalize():
            self.view.outcome = OUTCOME_FINALIZED
            return
        remaining = self.manager.progress()
        unresolved = remaining.total_count - remaining.resolved_count
        self.view.status_message = (
            f"Cannot finalize: {unresolved} unresolved conflict"
            f"{'' if unresolved == 1 else 's'} remain"
        )

    def cancel(self) -> None:
        self.manager.request_cancel()
        self.view.outcome = OUTCOME_CANCELLED

    # ===== MENU NAVIGATION =====

    def move_selection_up(self, num_options: int) -> None:
        self.view.selected = (self.view.selected - 1) % num_options

    def move_selection_down(self, num_options: int) -> None:
        self.view.selected = (self.view.selected + 1) % num_options
