# mergeview/mergeview_io/descriptors.py
# Conflict descriptor JSON <-> ConflictFile conversion

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..core.conflicts import render_resolution
from ..core.exceptions import DescriptorError
from ..core.types import ConflictFile, ConflictSection
from .generics import read_json_safe, write_json_safe

_REQUIRED_SECTION_KEYS = (
    "id",
    "startLine",
    "endLine",
    "currentContent",
    "incomingContent",
)


# * Build ConflictFiles from parsed descriptor data (list, or {"files": [...]})
def files_from_records(data: Any, source: str = "<descriptor>") -> list[ConflictFile]:
    if isinstance(data, dict) and "files" in data:
        data = data["files"]
    if not isinstance(data, list):
        raise DescriptorError("Descriptor must be a list of file records", source)

    files: list[ConflictFile] = []
    for i, record in enumerate(data):
        if not isinstance(record, dict) or not isinstance(record.get("path"), str):
            raise DescriptorError(f"File record {i} has no 'path'", source)
        raw_sections = record.get("conflicts", [])
        if not isinstance(raw_sections, list):
            raise DescriptorError(f"{record['path']}: 'conflicts' must be a list", source)

        sections = [
            _section_from_record(raw, record["path"], source) for raw in raw_sections
        ]
        # incoming "resolved" flag is ignored; it is derived from sections
        files.append(ConflictFile(path=record["path"], conflicts=sections))
    return files


def _section_from_record(raw: Any, path: str, source: str) -> ConflictSection:
    if not isinstance(raw, dict):
        raise DescriptorError(f"{path}: conflict entries must be objects", source)
    missing = [key for key in _REQUIRED_SECTION_KEYS if key not in raw]
    if missing:
        raise DescriptorError(
            f"{path}: conflict {raw.get('id', '?')} missing {', '.join(missing)}", source
        )
    try:
        start_line = int(raw["startLine"])
        end_line = int(raw["endLine"])
    except (TypeError, ValueError):
        raise DescriptorError(f"{path}: conflict {raw['id']} has non-numeric lines", source)
    return ConflictSection(
        id=str(raw["id"]),
        start_line=start_line,
        end_line=end_line,
        current_content=str(raw["currentContent"]),
        incoming_content=str(raw["incomingContent"]),
        base_content=raw.get("baseContent"),
    )


# * Load a conflict descriptor JSON file
def load_descriptor(path: Path) -> list[ConflictFile]:
    return files_from_records(read_json_safe(path), str(path))


# * Serialize a changeset w/ resolutions & rendered text
def records_from_files(files: list[ConflictFile]) -> list[dict[str, Any]]:
    records = []
    for conflict_file in files:
        records.append(
            {
                "path": conflict_file.path,
                "resolved": conflict_file.resolved,
                "conflicts": [
                    {
                        "id": s.id,
                        "startLine": s.start_line,
                        "endLine": s.end_line,
                        "resolution": s.resolution.value if s.resolution else None,
                        "content": render_resolution(s),
                    }
                    for s in conflict_file.conflicts
                ],
            }
        )
    return records


# * Write the resolution report for a changeset
def write_resolution_report(files: list[ConflictFile], path: Path) -> None:
    write_json_safe({"files": records_from_files(files)}, path)
