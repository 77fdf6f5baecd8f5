# mergeview/ui/conflict_resolution/resolver_input.py
# Keyboard handling for the interactive conflict resolver

from __future__ import annotations

from readchar import key

from .resolver_state import (
    ResolverViewState,
    ResolverStateManager,
    ResolverMode,
    OPTIONS,
    OPTION_RESOLUTIONS,
)


class ResolverInputHandler:

    def __init__(self, view: ResolverViewState, state_manager: ResolverStateManager):
        self.view = view
        self.manager = state_manager

    # returns False once the session should stop
    def handle_key(self, k: str) -> bool:
        if self.view.mode == ResolverMode.TEXT_INPUT:
            self._handle_text_input_key(k)
        else:
            self._handle_menu_key(k)
        return not self.view.is_done

    def _handle_menu_key(self, k: str) -> None:
        if k in (key.UP, "k"):
            self.manager.move_selection_up(len(OPTIONS))
        elif k in (key.DOWN, "j"):
            self.manager.move_selection_down(len(OPTIONS))
        elif k == key.ENTER:
            self._process_menu_selection()
        elif k in (key.TAB, "n"):
            self.manager.next_section()
        elif k in (key.ESC, key.CTRL_C):
            self.manager.cancel()

    def _handle_text_input_key(self, k: str) -> None:
        if k == key.ESC:
            self.manager.cancel_text_input()
        elif k == key.ENTER:
            self.manager.submit_manual()
        elif k == key.BACKSPACE:
            self.manager.delete_before_cursor()
        elif k == key.LEFT:
            self.manager.move_cursor_left()
        elif k == key.RIGHT:
            self.manager.move_cursor_right()
        elif len(k) == 1 and k.isprintable():
            self.manager.insert_char(k)

    def _process_menu_selection(self) -> None:
        selected_option = OPTIONS[self.view.selected]

        if selected_option in OPTION_RESOLUTIONS:
            self.manager.apply_choice(OPTION_RESOLUTIONS[selected_option])
        elif selected_option == "Manual":
            self.manager.enter_manual_mode()
        elif selected_option == "Next Section":
            self.manager.next_section()
        elif selected_option == "Next File":
            self.manager.next_file()
        elif selected_option == "Finalize":
            self.manager.finalize()
        elif selected_option == "Cancel":
            self.manager.cancel()
