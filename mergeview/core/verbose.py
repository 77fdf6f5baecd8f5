# mergeview/core/verbose.py
# --verbose / --log-file tracing: file reads, command stages, settings & resolution choices

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from .constants import Resolution
from .output import get_output_manager, set_output_manager, OutputLevel, CATEGORY_CONFLICT


# * Register the rich-backed manager at the level the global flags ask for.
# * --verbose in dev mode also turns on engine debug tracing.
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
    quiet: bool = False,
) -> None:
    from ..cli.output_manager import OutputManager

    if enabled:
        requested_level = OutputLevel.DEBUG if dev_mode else OutputLevel.VERBOSE
    else:
        requested_level = OutputLevel.NORMAL

    manager = OutputManager()
    manager.initialize(
        requested_level=requested_level,
        dev_mode=dev_mode,
        quiet=quiet,
        log_file=log_file,
    )
    set_output_manager(manager)


def is_verbose_enabled() -> bool:
    return get_output_manager().is_verbose_enabled()


def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().verbose(message, category, detail)


def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Read: {path}{size_str}", "FILE")


def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Write: {path}{size_str}", "FILE")


# e.g. [STAGE] Resolve: strategy incoming
def vlog_stage(stage: str, description: str | None = None) -> None:
    message = f"{stage}: {description}" if description else stage
    get_output_manager().verbose(message, "STAGE")


def vlog_config(key: str, value: Any) -> None:
    get_output_manager().verbose(f"{key} = {value}", "CONFIG")


# * Sections found in one conflicted file; clean files are noted as skipped
def vlog_changeset(path: str, section_ids: list[str]) -> None:
    if not section_ids:
        get_output_manager().verbose(f"{path}: no conflict markers, skipped", CATEGORY_CONFLICT)
        return
    get_output_manager().verbose(
        f"{path}: {len(section_ids)} conflict(s)",
        CATEGORY_CONFLICT,
        detail=", ".join(section_ids),
    )


# * One resolution change reported by the tracker (None means un-resolved)
def vlog_resolution(section_id: str, resolution: Optional[Resolution]) -> None:
    choice = resolution.value if resolution is not None else "unset"
    get_output_manager().verbose(f"{section_id} -> {choice}", CATEGORY_CONFLICT)
