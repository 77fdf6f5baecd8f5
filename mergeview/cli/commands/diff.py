# mergeview/cli/commands/diff.py
# Line diff between two files & unified-diff (patch) rendering

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ...config.settings import get_settings
from ...core.constants import DIFF_MATCHED, DIFF_POSITIONAL
from ...core.diff_parser import parse_hunks, diff_stats
from ...core.line_diff import compute_diff
from ...core.verbose import vlog_stage, vlog_config
from ...mergeview_io.console import console
from ...mergeview_io.generics import read_text_safe
from ...ui.diff_view import file_title, render_diff_table, render_hunks, render_stats
from ...ui.rich_components import themed_panel
from ..app import app
from ..decorators import handle_mergeview_error


# pick line numbers from the flag, falling back to settings
def _line_numbers(flag: Optional[bool], default: bool) -> bool:
    return default if flag is None else flag


# * Show a line-by-line diff between two text files
@app.command(help="Show a line diff between two text files")
@handle_mergeview_error
def diff(
    ctx: typer.Context,
    old: Path = typer.Argument(..., help="Original file"),
    new: Path = typer.Argument(..., help="Modified file"),
    matched: Optional[bool] = typer.Option(
        None,
        "--matched/--positional",
        help="Align lines w/ sequence matching instead of by position",
    ),
    line_numbers: Optional[bool] = typer.Option(
        None, "--line-numbers/--no-line-numbers", help="Show line number gutters"
    ),
) -> None:
    settings = get_settings(ctx)
    if matched is None:
        algorithm = settings.diff_algorithm
    else:
        algorithm = DIFF_MATCHED if matched else DIFF_POSITIONAL
    vlog_config("diff_algorithm", algorithm)

    old_text = read_text_safe(old)
    new_text = read_text_safe(new)

    vlog_stage("Diff", f"{old} -> {new}")
    lines = compute_diff(old_text, new_text, algorithm)

    title = f"{file_title(old.name)} -> {escape(new.name)}"
    table = render_diff_table(lines, _line_numbers(line_numbers, settings.line_numbers))
    console.print(themed_panel(table, title=title))
    console.print(render_stats(diff_stats(lines)))


# * Render a unified-diff file hunk by hunk
@app.command(help="Render a unified diff (patch) file hunk by hunk")
@handle_mergeview_error
def patch(
    ctx: typer.Context,
    patch_file: Path = typer.Argument(..., help="Unified diff file"),
    line_numbers: Optional[bool] = typer.Option(
        None, "--line-numbers/--no-line-numbers", help="Show line number gutters"
    ),
) -> None:
    settings = get_settings(ctx)
    text = read_text_safe(patch_file)

    vlog_stage("Parse", str(patch_file))
    hunks = parse_hunks(text)
    vlog_stage("Parse", f"{len(hunks)} hunk(s)")

    console.print(f"[mv.accent]{file_title(patch_file.name)}[/]")
    console.print(render_hunks(hunks, _line_numbers(line_numbers, settings.line_numbers)))
    all_lines = [line for hunk in hunks for line in hunk.lines]
    console.print(render_stats(diff_stats(all_lines)))
