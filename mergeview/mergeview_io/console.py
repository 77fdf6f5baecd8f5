# mergeview/mergeview_io/console.py
# Centralized console management for the entire mergeview application

# Architecture notes:
# - Console is created as a bare Console() at import time (no theme loading)
# - Theme initialization happens explicitly in app.py:main_callback() via initialize_theme()
# - The _ConsoleProxy pattern allows reconfiguring/resetting without breaking module-level references
# - Tests: use reset_console() for isolation; swap the proxied Console to record output

from __future__ import annotations
from typing import Any
from rich.console import Console


# proxy delegating to underlying Console instance; all Console methods forwarded via __getattr__
class _ConsoleProxy:
    __slots__ = ("_console",)

    def __init__(self) -> None:
        self._console = Console()

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _set_console(self, new_console: Console) -> None:
        self._console = new_console

    def _get_console(self) -> Console:
        return self._console


# single proxy instance used by all modules for consistent output
console = _ConsoleProxy()


# * Reset console to default configuration (useful for tests)
def reset_console() -> Console:
    console._set_console(Console())
    return console._get_console()


__all__ = [
    "console",
    "reset_console",
]
