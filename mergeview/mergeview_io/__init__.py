# mergeview/mergeview_io/__init__.py
# File & console I/O for the host layers

from .console import console, reset_console
from .generics import read_json_safe, write_json_safe, read_text_safe
from .descriptors import (
    load_descriptor,
    files_from_records,
    records_from_files,
    write_resolution_report,
)

__all__ = [
    "console",
    "reset_console",
    "read_json_safe",
    "write_json_safe",
    "read_text_safe",
    "load_descriptor",
    "files_from_records",
    "records_from_files",
    "write_resolution_report",
]
