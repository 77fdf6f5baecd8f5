# tests/unit/ui/conflict_resolution/test_interactive_resolver.py
# Unit tests for the interactive conflict resolver: keys, state transitions & rendering

import pytest
from readchar import key

from mergeview.core.constants import Resolution
from mergeview.core.types import ConflictFile
from mergeview.ui.conflict_resolution import (
    InteractiveConflictResolver,
    ResolverRenderer,
    ResolverMode,
    OPTIONS,
    OUTCOME_CANCELLED,
    OUTCOME_FINALIZED,
)

from test_support.rich_capture import render_plain


@pytest.fixture
def resolver(two_file_changeset):
    return InteractiveConflictResolver(
        two_file_changeset, renderer=ResolverRenderer(width=100, height=30)
    )


def _select(resolver, option):
    # move the menu cursor down to the named option
    while OPTIONS[resolver.view.selected] != option:
        resolver.handle_key(key.DOWN)


class TestStartup:

    # * Verify session starts on the first unresolved section
    def test_starts_on_first_section(self, resolver):

        assert resolver.manager.state.active_path == "src/app.py"
        assert resolver.manager.state.active_section_id == "s1"
        assert resolver.is_done is False

    # * Verify already resolved sections are skipped at startup
    def test_skips_resolved(self, two_file_changeset):

        two_file_changeset[0].conflicts[0].resolution = Resolution.USE_CURRENT
        resolver = InteractiveConflictResolver(
            two_file_changeset, renderer=ResolverRenderer(100, 30)
        )

        assert resolver.manager.state.active_section_id == "s2"

    # * Verify a leading file w/o sections is skipped at startup
    def test_skips_clean_first_file(self, two_file_changeset):

        files = [ConflictFile(path="clean.txt", conflicts=[])] + two_file_changeset
        resolver = InteractiveConflictResolver(files, renderer=ResolverRenderer(100, 30))

        assert resolver.manager.state.active_path == "src/app.py"
        assert resolver.manager.state.active_section_id == "s1"
        resolver.handle_key(key.ENTER)
        assert resolver.view.status_message is None
        assert two_file_changeset[0].conflicts[0].resolution == Resolution.USE_CURRENT


class TestMenuKeys:

    # * Verify menu navigation wraps
    def test_navigation_wraps(self, resolver):

        resolver.handle_key(key.UP)
        assert OPTIONS[resolver.view.selected] == "Cancel"
        resolver.handle_key("j")
        assert resolver.view.selected == 0

    # * Verify choosing a resolution advances to the next unresolved section
    def test_choice_advances(self, resolver, two_file_changeset):

        resolver.handle_key(key.ENTER)

        assert two_file_changeset[0].conflicts[0].resolution == Resolution.USE_CURRENT
        assert resolver.manager.state.active_section_id == "s2"

    # * Verify advancing crosses into the next file
    def test_advance_across_files(self, resolver):

        _select(resolver, "Use Both")
        resolver.handle_key(key.ENTER)
        resolver.handle_key(key.ENTER)

        assert resolver.manager.state.active_path == "README.md"
        assert resolver.manager.state.active_section_id == "s3"

    # * Verify next section key does not resolve anything
    def test_next_section(self, resolver, two_file_changeset):

        resolver.handle_key(key.TAB)

        assert resolver.manager.state.active_section_id == "s2"
        assert two_file_changeset[0].conflicts[0].resolution is None

    # * Verify finalize is refused while conflicts remain
    def test_finalize_refused(self, resolver):

        _select(resolver, "Finalize")
        keep_going = resolver.handle_key(key.ENTER)

        assert keep_going is True
        assert resolver.view.outcome is None
        assert resolver.view.status_message == "Cannot finalize: 3 unresolved conflicts remain"

    # * Verify escape cancels the session
    def test_escape_cancels(self, resolver):

        keep_going = resolver.handle_key(key.ESC)

        assert keep_going is False
        assert resolver.get_result().outcome == OUTCOME_CANCELLED
        assert resolver.get_result().finalized is False
        assert resolver.manager.state.active_path is None


class TestManualInput:

    # * Verify manual mode prefills w/ the current side
    def test_prefill(self, resolver):

        _select(resolver, "Manual")
        resolver.handle_key(key.ENTER)

        assert resolver.view.mode == ResolverMode.TEXT_INPUT
        assert resolver.view.text_input_buffer == "A"
        assert resolver.view.text_input_cursor == 1

    # * Verify stale manual text is ignored once a side was chosen
    def test_prefill_ignores_stale_manual(self, resolver, two_file_changeset):

        section = two_file_changeset[0].conflicts[0]
        section.resolution = Resolution.USE_INCOMING
        section.manual_content = "old"

        _select(resolver, "Manual")
        resolver.handle_key(key.ENTER)

        assert resolver.view.text_input_buffer == "B"

    # * Verify editing keys & submit store manual content
    def test_edit_and_submit(self, resolver, two_file_changeset):

        _select(resolver, "Manual")
        resolver.handle_key(key.ENTER)
        resolver.handle_key(key.BACKSPACE)
        for char in "XZ":
            resolver.handle_key(char)
        resolver.handle_key(key.LEFT)
        resolver.handle_key("Y")
        resolver.handle_key(key.ENTER)

        section = two_file_changeset[0].conflicts[0]
        assert section.resolution == Resolution.MANUAL
        assert section.manual_content == "XYZ"
        assert resolver.view.mode == ResolverMode.MENU
        assert resolver.manager.state.active_section_id == "s2"

    # * Verify escape leaves manual mode w/o resolving
    def test_escape_text_input(self, resolver, two_file_changeset):

        _select(resolver, "Manual")
        resolver.handle_key(key.ENTER)
        resolver.handle_key(key.ESC)

        assert resolver.view.mode == ResolverMode.MENU
        assert resolver.is_done is False
        assert two_file_changeset[0].conflicts[0].resolution is None


class TestFullSession:

    # * Verify resolving everything then finalizing ends the session
    def test_resolve_all_then_finalize(self, resolver, two_file_changeset):

        resolver.handle_key(key.ENTER)
        resolver.handle_key(key.ENTER)
        resolver.handle_key(key.ENTER)
        _select(resolver, "Finalize")
        keep_going = resolver.handle_key(key.ENTER)

        assert keep_going is False
        result = resolver.get_result()
        assert result.outcome == OUTCOME_FINALIZED
        assert result.finalized is True
        assert all(f.resolved for f in result.files)

    # * Verify finalize callback fires once
    def test_finalize_callback(self, two_file_changeset):

        finalized = []
        resolver = InteractiveConflictResolver(
            two_file_changeset,
            on_finalize=finalized.append,
            renderer=ResolverRenderer(100, 30),
        )
        for _ in range(3):
            resolver.handle_key(key.ENTER)
        _select(resolver, "Finalize")
        resolver.handle_key(key.ENTER)

        assert finalized == [two_file_changeset]


class TestRendering:

    # * Verify the screen shows menu, file list & section sides
    def test_render_screen(self, resolver):

        output = render_plain(resolver.render_screen(), width=100)

        assert "Options" in output
        assert "> Use Current" in output
        assert "src/app.py (code)" in output
        assert "Conflict 1 of 2" in output
        assert "Current:" in output
        assert "Resolved 0/3 (0%)" in output

    # * Verify text input view shows the cursor
    def test_render_text_input(self, resolver):

        _select(resolver, "Manual")
        resolver.handle_key(key.ENTER)
        output = render_plain(resolver.render_screen(), width=100)

        assert "MANUAL RESOLUTION" in output
        assert "> A|" in output

    # * Verify status message appears in the footer
    def test_render_status_message(self, resolver):

        _select(resolver, "Finalize")
        resolver.handle_key(key.ENTER)
        output = render_plain(resolver.render_screen(), width=100)

        assert "Cannot finalize" in output
