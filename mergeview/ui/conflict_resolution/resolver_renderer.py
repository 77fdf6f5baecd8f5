# mergeview/ui/conflict_resolution/resolver_renderer.py
# Rendering components for the interactive conflict resolver

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape

from ..rich_components import (
    Layout,
    Panel,
    Text,
    Align,
    RenderableType,
    Table,
    ProgressBar,
)
from ..diff_view import file_title
from ...core.conflicts import render_resolution
from .resolver_state import OPTIONS, ResolverMode

if TYPE_CHECKING:
    from .resolver_state import ResolverViewState
    from ...core.conflicts import ResolutionState
    from ...core.types import ConflictSection, ResolutionProgress


MIN_W, MAX_W = 60, 140
MIN_H, MAX_H = 25, 40

# lines of each side shown before truncating
PREVIEW_LINES = 6


def _clamp(n: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, n))


def _preview(content: str, style: str, limit: int = PREVIEW_LINES) -> list[Text]:
    lines = content.split("\n") if content else []
    shown = [Text("  " + line, style=style) for line in lines[:limit]]
    if not lines:
        shown.append(Text("  (empty)", style="dim"))
    elif len(lines) > limit:
        shown.append(Text(f"  ... {len(lines) - limit} more lines", style="dim"))
    return shown


class ResolverRenderer:

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    # ===== SECTION DISPLAY =====

    def render_section_display(self, section: "ConflictSection | None") -> list[Text]:
        if section is None:
            return [Text("No conflict section selected", style="dim")]

        lines: list[Text] = []
        lines.append(Text(f"Section: {section.id}", style="bold mv.accent"))
        lines.append(
            Text(f"Lines: {section.start_line}-{section.end_line}", style="mv.accent2")
        )
        status = section.resolution.value if section.resolution else "unresolved"
        lines.append(Text(f"Resolution: {status}", style="mv.accent2"))
        lines.append(Text(""))

        lines.append(Text("Current:", style="bold"))
        lines.extend(_preview(section.current_content, "diff.deletion"))
        if section.base_content is not None:
            lines.append(Text("Base:", style="bold"))
            lines.extend(_preview(section.base_content, "dim"))
        lines.append(Text("Incoming:", style="bold"))
        lines.extend(_preview(section.incoming_content, "diff.addition"))

        if section.is_resolved:
            lines.append(Text(""))
            lines.append(Text("Result:", style="bold"))
            lines.extend(_preview(render_resolution(section), "mv.accent"))

        return lines

    # ===== TEXT INPUT DISPLAY =====

    def render_text_input_display(self, view: "ResolverViewState") -> list[Text]:
        lines: list[Text] = []
        lines.append(Text("MANUAL RESOLUTION", style="bold yellow"))
        lines.append(Text("Type the merged content for this section:", style="dim"))
        lines.append(Text(""))
        lines.append(Text("Your input:", style="bold"))

        cursor_char = "|"
        display_text = (
            view.text_input_buffer[: view.text_input_cursor]
            + cursor_char
            + view.text_input_buffer[view.text_input_cursor :]
        )

        # best-effort trimming to visible frame width
        frame_w = max(20, self.width - 6)
        if len(display_text) > frame_w - 2:
            display_text = "..." + display_text[-(frame_w - 3) :]

        lines.append(Text("> " + display_text))
        lines.append(Text(""))
        lines.append(
            Text("Press [Enter] to submit, [Esc] to cancel", style="dim italic")
        )
        return lines

    # ===== HEADER/FOOTER =====

    def render_header(self, state: "ResolutionState") -> RenderableType:
        active = state.active_file
        if active is None:
            left_text = Text("No file selected", style="dim")
            right_text = Text("")
        else:
            left_text = Text.from_markup(f"[bold mv.accent]{file_title(active.path)}[/]")
            ids = [s.id for s in active.conflicts]
            index = ids.index(state.active_section_id) + 1 if state.active_section_id in ids else 0
            right_text = Text(f"Conflict {index} of {len(ids)}", style="mv.accent2")

        header_table = Table.grid(padding=0, expand=True)
        header_table.add_column(ratio=1, justify="left")
        header_table.add_column(no_wrap=True, justify="right")
        header_table.add_row(left_text, right_text)

        return Panel(header_table, border_style="dim", padding=(0, 1))

    def render_footer(
        self, progress: "ResolutionProgress", status_message: str | None
    ) -> RenderableType:
        grid = Table.grid(padding=(0, 1), expand=True)
        grid.add_column(no_wrap=True)
        grid.add_column(ratio=1)
        summary = Text(
            f"Resolved {progress.resolved_count}/{progress.total_count} "
            f"({progress.percent:.0f}%)",
            style="mv.accent2",
        )
        bar = ProgressBar(total=100, completed=progress.percent)
        grid.add_row(summary, bar)
        if status_message:
            grid.add_row(Text(status_message, style="warning"), Text(""))
        return Panel(grid, border_style="dim", padding=(0, 1))

    # ===== BODY CONTENT ROUTING =====

    def get_body_content(
        self, view: "ResolverViewState", state: "ResolutionState"
    ) -> RenderableType:
        if view.mode == ResolverMode.TEXT_INPUT:
            return Text("\n").join(self.render_text_input_display(view))
        return Text("\n").join(self.render_section_display(state.active_section))

    def render_file_list(self, state: "ResolutionState") -> list[Text]:
        rows = []
        for conflict_file in state.files:
            mark = "✓" if conflict_file.resolved else " "
            style = "success" if conflict_file.resolved else "mv.accent2"
            if conflict_file.path == state.active_path:
                style = "reverse bold mv.accent"
            rows.append(
                Text(
                    f"{mark} {conflict_file.path} "
                    f"({conflict_file.resolved_count}/{len(conflict_file.conflicts)})",
                    style=style,
                )
            )
        return rows

    # ===== MAIN SCREEN LAYOUT =====

    def render_screen(
        self,
        view: "ResolverViewState",
        state: "ResolutionState",
        progress: "ResolutionProgress",
    ) -> RenderableType:
        main_layout = Layout()
        main_layout.split_column(
            Layout(name="header", size=3),
            Layout(name="content", ratio=1),
            Layout(name="footer", size=4 if view.status_message else 3),
        )

        content_layout = Layout()
        content_layout.split_row(
            Layout(name="side", ratio=1), Layout(name="body", ratio=3)
        )
        side_layout = Layout()
        side_layout.split_column(
            Layout(name="menu", ratio=2), Layout(name="files", ratio=1)
        )

        # left menu w/ selection highlighting
        grid = Table.grid(padding=0)
        grid.add_column(no_wrap=True)
        for i, opt in enumerate(OPTIONS):
            is_sel = i == view.selected
            prefix = "> " if is_sel else "  "
            style = "reverse bold mv.accent" if is_sel else "mv.accent2"
            grid.add_row(Text(prefix + opt, style=style))

        menu_panel = Panel(
            Align.center(grid, vertical="top"),
            title="Options",
            border_style="mv.accent2",
            padding=(1, 1),
        )
        files_panel = Panel(
            Text("\n").join(self.render_file_list(state)),
            title="Files",
            border_style="mv.accent2",
        )

        active = state.active_section
        body_title = f"Conflict {escape(active.id)}" if active is not None else "Conflict"
        body_panel = Panel(
            self.get_body_content(view, state), title=body_title, border_style="mv.accent2"
        )

        side_layout["menu"].update(menu_panel)
        side_layout["files"].update(files_panel)
        content_layout["side"].update(side_layout)
        content_layout["body"].update(body_panel)

        main_layout["header"].update(self.render_header(state))
        main_layout["content"].update(content_layout)
        main_layout["footer"].update(self.render_footer(progress, view.status_message))

        outer = Panel(
            main_layout,
            border_style="mv.accent",
            width=self.width,
            height=self.height,
        )
        return Align.left(outer, vertical="top")


def create_renderer_from_console() -> ResolverRenderer:
    from ...mergeview_io.console import console

    width = _clamp(console.size.width, MIN_W, MAX_W)
    height = _clamp(console.size.height, MIN_H, MAX_H)
    return ResolverRenderer(width, height)
