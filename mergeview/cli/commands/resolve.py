# mergeview/cli/commands/resolve.py
# Conflict resolution (strategy or interactive) & changeset status commands

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.constants import Resolution
from ...core.conflict_markers import parse_conflict_markers, apply_resolutions
from ...core.conflicts import (
    ConflictResolutionManager,
    render_resolution,
    total_conflicts,
    resolved_conflicts,
)
from ...core.types import ConflictFile, ResolutionProgress
from ...core.verbose import vlog_stage, vlog_changeset, vlog_resolution
from ...mergeview_io.console import console
from ...mergeview_io.descriptors import load_descriptor, write_resolution_report
from ...mergeview_io.generics import read_text_safe
from ...ui.conflict_resolution import InteractiveConflictResolver
from ...ui.diff_view import file_title
from ...ui.rich_components import Text, themed_panel, themed_table
from ..app import app
from ..decorators import handle_mergeview_error
from ..helpers import can_run_interactive, print_success, print_warning


# * Bulk strategies accepted by --strategy
class Strategy(str, Enum):
    CURRENT = "current"
    INCOMING = "incoming"
    BOTH = "both"


# * Build the changeset from a descriptor or from conflict markers in files
def _load_changeset(
    paths: list[Path], descriptor: Optional[Path], marker_size: int
) -> tuple[list[ConflictFile], dict[str, str]]:
    if descriptor is not None:
        vlog_stage("Load", f"descriptor {descriptor}")
        return load_descriptor(descriptor), {}

    if not paths:
        raise typer.BadParameter("Provide one or more FILE arguments or --descriptor")

    files: list[ConflictFile] = []
    sources: dict[str, str] = {}
    for path in paths:
        text = read_text_safe(path)
        conflict_file = parse_conflict_markers(text, str(path), marker_size)
        vlog_changeset(conflict_file.path, [s.id for s in conflict_file.conflicts])
        # only files w/ at least one section belong to the changeset
        if not conflict_file.conflicts:
            continue
        files.append(conflict_file)
        sources[conflict_file.path] = text
    return files, sources


# * Per-file conflict counts & overall progress
def _print_summary(files: list[ConflictFile]) -> None:
    table = themed_table(show_header=True)
    table.add_column("File", style="mv.accent")
    table.add_column("Conflicts", justify="right")
    table.add_column("Resolved", justify="right")
    table.add_column("Status")
    for conflict_file in files:
        status = "[success]resolved[/]" if conflict_file.resolved else "[warning]pending[/]"
        table.add_row(
            file_title(conflict_file.path),
            str(len(conflict_file.conflicts)),
            str(conflict_file.resolved_count),
            status,
        )
    console.print(table)

    progress = ResolutionProgress(resolved_conflicts(files), total_conflicts(files))
    console.print(
        f"[mv.accent2]{progress.resolved_count}/{progress.total_count}[/] conflicts "
        f"resolved [dim]({progress.percent:.0f}%)[/]"
    )


def _print_merged(
    files: list[ConflictFile], sources: dict[str, str], marker_size: int
) -> None:
    for conflict_file in files:
        if conflict_file.path in sources:
            merged = apply_resolutions(
                sources[conflict_file.path], conflict_file, marker_size
            )
            console.print(themed_panel(Text(merged), title=file_title(conflict_file.path)))
            continue
        # descriptor input: no source text, show each section's rendered content
        for section in conflict_file.conflicts:
            title = f"{file_title(conflict_file.path)} {section.id}"
            console.print(themed_panel(Text(render_resolution(section)), title=title))


# * Resolve conflicts w/ a bulk strategy or the interactive resolver
@app.command(help="Resolve merge conflicts w/ a strategy or interactively")
@handle_mergeview_error
def resolve(
    ctx: typer.Context,
    paths: Optional[list[Path]] = typer.Argument(
        None, help="Files containing conflict markers"
    ),
    descriptor: Optional[Path] = typer.Option(
        None, "--descriptor", "-d", help="JSON conflict descriptor instead of FILE args"
    ),
    strategy: Optional[Strategy] = typer.Option(
        None, "--strategy", "-s", help="Resolve every conflict the same way"
    ),
    show_merged: bool = typer.Option(
        False, "--show-merged", help="Print the merged text after resolving"
    ),
    report: Optional[Path] = typer.Option(
        None, "--report", help="Write a JSON resolution report"
    ),
) -> None:
    settings = get_settings(ctx)
    files, sources = _load_changeset(paths or [], descriptor, settings.marker_size)
    if total_conflicts(files) == 0:
        console.print("[dim]No conflicts found[/]")
        return

    if strategy is not None:
        vlog_stage("Resolve", f"strategy {strategy.value}")
        manager = ConflictResolutionManager.for_files(
            files, on_resolution_changed=vlog_resolution
        )
        manager.resolve_all(Resolution(strategy.value))
        manager.request_finalize()
    elif can_run_interactive(settings.interactive):
        vlog_stage("Resolve", "interactive")
        result = InteractiveConflictResolver(
            files, on_resolution_changed=vlog_resolution
        ).run()
        if not result.finalized:
            print_warning("Resolution cancelled")
            raise typer.Exit(1)
    else:
        _print_summary(files)
        print_warning(
            "Interactive resolver unavailable; pass --strategy current|incoming|both"
        )
        raise typer.Exit(1)

    _print_summary(files)
    if show_merged:
        _print_merged(files, sources, settings.marker_size)
    if report is not None:
        write_resolution_report(files, report)
        print_success("Report written to", str(report))


# * Show conflict counts per file & overall progress
@app.command(help="Show conflict counts & resolution progress")
@handle_mergeview_error
def status(
    ctx: typer.Context,
    paths: Optional[list[Path]] = typer.Argument(
        None, help="Files containing conflict markers"
    ),
    descriptor: Optional[Path] = typer.Option(
        None, "--descriptor", "-d", help="JSON conflict descriptor instead of FILE args"
    ),
) -> None:
    settings = get_settings(ctx)
    files, _ = _load_changeset(paths or [], descriptor, settings.marker_size)
    if not files:
        console.print("[dim]No conflicts found[/]")
        return
    _print_summary(files)
