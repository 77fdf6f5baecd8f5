# mergeview/ui/conflict_resolution/resolver_display.py
# Interactive conflict resolution session w/ rich Live screen & readchar input

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from readchar import readkey

from ..rich_components import Live, RenderableType
from ...core.conflicts import (
    ConflictResolutionManager,
    ResolutionState,
    ResolutionChangedCallback,
    FinalizeCallback,
    CancelCallback,
)
from ...core.types import ConflictFile
from ...mergeview_io.console import console
from .resolver_state import ResolverViewState, ResolverStateManager, OUTCOME_FINALIZED
from .resolver_renderer import ResolverRenderer, create_renderer_from_console
from .resolver_input import ResolverInputHandler


# * Final result of a resolver session
@dataclass
class ResolverResult:
    files: list[ConflictFile]
    outcome: Optional[str]

    @property
    def finalized(self) -> bool:
        return self.outcome == OUTCOME_FINALIZED


# * Orchestrates an interactive resolution session
# * Coordinates the core manager, view state, rendering & input handling
class InteractiveConflictResolver:
    def __init__(
        self,
        files: list[ConflictFile],
        on_resolution_changed: ResolutionChangedCallback | None = None,
        on_finalize: FinalizeCallback | None = None,
        on_cancel: CancelCallback | None = None,
        renderer: ResolverRenderer | None = None,
    ):
        self._manager = ConflictResolutionManager(
            ResolutionState(files=files),
            on_resolution_changed=on_resolution_changed,
            on_finalize=on_finalize,
            on_cancel=on_cancel,
        )
        self._view = ResolverViewState()
        self._state_manager = ResolverStateManager(self._view, self._manager)
        self._input_handler = ResolverInputHandler(self._view, self._state_manager)
        self._renderer = renderer or create_renderer_from_console()

        # start on the first unresolved section, skipping clean or finished files
        if files:
            self._manager.select_file(files[0].path)
            active = self._manager.state.active_section
            if active is None or active.is_resolved:
                self._state_manager.advance_to_next_unresolved()

    # ===== STABLE COMPONENT ACCESSORS (read-only) =====

    @property
    def manager(self) -> ConflictResolutionManager:
        return self._manager

    @property
    def view(self) -> ResolverViewState:
        return self._view

    @property
    def state_manager(self) -> ResolverStateManager:
        return self._state_manager

    @property
    def renderer(self) -> ResolverRenderer:
        return self._renderer

    # ===== PUBLIC API =====

    @property
    def is_done(self) -> bool:
        return self._view.is_done

    def render_screen(self) -> RenderableType:
        return self._renderer.render_screen(
            self._view, self._manager.state, self._manager.progress()
        )

    def handle_key(self, k: str) -> bool:
        # Returns False to exit loop.
        return self._input_handler.handle_key(k)

    def get_result(self) -> ResolverResult:
        return ResolverResult(files=self._manager.files, outcome=self._view.outcome)

    def run(self) -> ResolverResult:
        with Live(
            self.render_screen(), console=console, screen=True, refresh_per_second=30
        ) as live:
            while not self.is_done:
                k = readkey()
                if not self.handle_key(k):
                    break
                live.update(self.render_screen())

        return self.get_result()
