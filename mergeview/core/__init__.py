# mergeview/core/__init__.py
# Pure diff & conflict engine - re-exports the public API

from .constants import DiffLineKind, Resolution, FileCategory
from .types import (
    DiffLine,
    DiffHunk,
    DiffStats,
    ConflictSection,
    ConflictFile,
    ResolutionProgress,
)
from .diff_parser import parse_unified_diff, parse_hunks, diff_stats
from .line_diff import compute_positional_diff, compute_matched_diff, compute_diff
from .file_category import classify_file
from .conflicts import (
    ConflictResolutionManager,
    ResolutionState,
    render_resolution,
    total_conflicts,
    resolved_conflicts,
)
from .conflict_markers import parse_conflict_markers, apply_resolutions

__all__ = [
    "DiffLineKind",
    "Resolution",
    "FileCategory",
    "DiffLine",
    "DiffHunk",
    "DiffStats",
    "ConflictSection",
    "ConflictFile",
    "ResolutionProgress",
    "parse_unified_diff",
    "parse_hunks",
    "diff_stats",
    "compute_positional_diff",
    "compute_matched_diff",
    "compute_diff",
    "classify_file",
    "ConflictResolutionManager",
    "ResolutionState",
    "render_resolution",
    "total_conflicts",
    "resolved_conflicts",
    "parse_conflict_markers",
    "apply_resolutions",
]
