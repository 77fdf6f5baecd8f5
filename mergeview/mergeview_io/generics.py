# mergeview/mergeview_io/generics.py
# Generic filesystem helpers: JSON & text read/write w/ verbose logging

from pathlib import Path
from typing import Any, Union
import json

from ..core.verbose import vlog_file_read, vlog_file_write
from ..core.exceptions import JSONParsingError, FileReadError, FileWriteError


def ensure_parent(path: Union[Path, str]) -> None:
    # create parent directories for any file path
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)


# write JSON w/ UTF-8 encoding, creating parent dirs as needed
def write_json_safe(obj: Any, path: Path) -> None:
    ensure_parent(path)
    content = json.dumps(obj, indent=2)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(f"Cannot write {path}: {e}", path)
    vlog_file_write(path, len(content))


# read JSON w/ UTF-8 encoding
def read_json_safe(path: Path) -> Any:
    text = read_text_safe(path)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        # create a trimmed snippet of the offending JSON for the error message
        lines = text.split("\n")
        # JSONDecodeError uses 1-based line numbers
        line_num = e.lineno - 1
        snippet_start = max(0, line_num - 2)
        snippet_end = min(len(lines), line_num + 3)
        snippet_lines = lines[snippet_start:snippet_end]

        # add line numbers & highlight the problematic line
        numbered_lines = []
        for i, line in enumerate(snippet_lines, start=snippet_start + 1):
            marker = ">>> " if i == e.lineno else "    "
            numbered_lines.append(f"{marker}{i:3}: {line}")

        snippet = "\n".join(numbered_lines)
        raise JSONParsingError(f"Invalid JSON in {path}:\n{snippet}\nError: {e.msg}")


# read a text file as UTF-8
def read_text_safe(path: Union[Path, str]) -> str:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(f"Cannot read {p}: {e}", p)
    vlog_file_read(p, len(text))
    return text
