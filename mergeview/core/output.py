# mergeview/core/output.py
# Output levels & the registry the diff/conflict engine logs through
# * The engine only sees OutputInterface; cli/output_manager.py registers the rich-backed manager

from __future__ import annotations

from enum import IntEnum
from typing import Protocol, runtime_checkable, Optional


# engine categories; host layers add FILE, STAGE & CONFIG
CATEGORY_DIFF = "DIFF"
CATEGORY_CONFLICT = "CONFLICT"


class OutputLevel(IntEnum):
    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


@runtime_checkable
class OutputInterface(Protocol):
    def get_level(self) -> OutputLevel: ...

    def is_debug_enabled(self) -> bool: ...

    def is_verbose_enabled(self) -> bool: ...

    def debug(self, msg: str, category: str = "DEBUG") -> None: ...

    def verbose(
        self, msg: str, category: str = "INFO", detail: Optional[str] = None
    ) -> None: ...

    def info(self, msg: str) -> None: ...

    def start_session(self) -> None: ...

    def end_session(self) -> None: ...


# * Silent manager: parsing & resolving stay side-effect free until the CLI registers one
class NullOutputManager:
    def get_level(self) -> OutputLevel:
        return OutputLevel.NORMAL

    def is_debug_enabled(self) -> bool:
        return False

    def is_verbose_enabled(self) -> bool:
        return False

    def debug(self, msg: str, category: str = "DEBUG") -> None:
        pass

    def verbose(
        self, msg: str, category: str = "INFO", detail: Optional[str] = None
    ) -> None:
        pass

    def info(self, msg: str) -> None:
        pass

    def start_session(self) -> None:
        pass

    def end_session(self) -> None:
        pass


_output_manager: OutputInterface = NullOutputManager()


def set_output_manager(manager: OutputInterface) -> None:
    global _output_manager
    _output_manager = manager


def get_output_manager() -> OutputInterface:
    return _output_manager


# * Back to the silent manager (test isolation)
def reset_output_manager() -> None:
    global _output_manager
    _output_manager = NullOutputManager()
