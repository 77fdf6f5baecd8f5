# mergeview/cli/output_manager.py
# Rich-backed OutputManager for --verbose, --quiet, --log-file & dev-mode debug tracing
# * Registered by init_verbose() from the root callback; closed when the command exits

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import IO, Optional

from ..core.output import OutputLevel, CATEGORY_DIFF, CATEGORY_CONFLICT

# category tag -> theme style; unknown categories fall back to mv.accent2
CATEGORY_STYLES = {
    CATEGORY_DIFF: "diff.header",
    CATEGORY_CONFLICT: "warning",
    "FILE": "mv.accent",
    "STAGE": "mv.accent",
    "CONFIG": "dim",
}

_RULE = "=" * 60


class OutputManager:
    # OutputInterface implementation: console rows tagged by category, plain-text log file copy

    def __init__(self) -> None:
        self._level = OutputLevel.NORMAL
        self._dev_mode = False
        self._session_start: float | None = None
        self._log_file_path: Path | None = None
        self._log_file_handle: Optional[IO[str]] = None

    def initialize(
        self,
        requested_level: OutputLevel = OutputLevel.NORMAL,
        dev_mode: bool = False,
        quiet: bool = False,
        log_file: Path | None = None,
    ) -> None:
        self._dev_mode = dev_mode
        self._level = self._compute_effective_level(requested_level, dev_mode, quiet)
        self._session_start = time.time()
        self._setup_log_file(log_file)

    def _compute_effective_level(
        self, requested: OutputLevel, dev_mode: bool, quiet: bool
    ) -> OutputLevel:
        # --quiet wins; engine DEBUG traces only in dev mode
        if quiet:
            return OutputLevel.QUIET
        ceiling = OutputLevel.DEBUG if dev_mode else OutputLevel.VERBOSE
        return min(requested, ceiling)

    def get_level(self) -> OutputLevel:
        return self._level

    def is_debug_enabled(self) -> bool:
        return self._level >= OutputLevel.DEBUG

    def is_verbose_enabled(self) -> bool:
        return self._level >= OutputLevel.VERBOSE

    def debug(self, msg: str, category: str = "DEBUG") -> None:
        if not self.is_debug_enabled():
            return
        from ..mergeview_io.console import console

        console.print(f"[debug]\\[{category}][/] {msg}")
        self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")

    def verbose(
        self, msg: str, category: str = "INFO", detail: Optional[str] = None
    ) -> None:
        if not self.is_verbose_enabled():
            return
        from ..mergeview_io.console import console

        style = CATEGORY_STYLES.get(category, "mv.accent2")
        console.print(f"[dim][{self._elapsed()}][/] [{style}]\\[{category}][/] {msg}")
        self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")
        for line in (detail or "").splitlines():
            console.print(f"  [dim]{line}[/]")
            self._write_to_file(f"  {line}")

    def info(self, msg: str) -> None:
        if self._level >= OutputLevel.NORMAL:
            from ..mergeview_io.console import console

            console.print(msg)

    def start_session(self) -> None:
        self._session_start = time.time()
        self._write_to_file(
            f"\n{_RULE}\nmergeview session {datetime.now().isoformat()}\n"
            f"Level: {self._level.name}{' (dev mode)' if self._dev_mode else ''}\n{_RULE}"
        )

    def end_session(self) -> None:
        self._write_to_file(f"{_RULE}\nSession ended after {self._elapsed()}\n{_RULE}\n")
        self.cleanup()

    # ===== LOG FILE =====

    def _elapsed(self) -> str:
        if self._session_start is None:
            return "0.00s"
        return f"{time.time() - self._session_start:.2f}s"

    def _setup_log_file(self, log_file: Path | None) -> None:
        self.cleanup()

        self._log_file_path = log_file
        if log_file is None:
            return
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._log_file_handle = open(log_file, "a", encoding="utf-8")
        except OSError:
            # an unusable log path leaves console logging on
            self._log_file_path = None
            self._log_file_handle = None

    def _write_to_file(self, msg: str) -> None:
        if self._log_file_handle is None:
            return
        try:
            self._log_file_handle.write(f"{msg}\n")
            self._log_file_handle.flush()
        except OSError:
            self.cleanup()

    def cleanup(self) -> None:
        if self._log_file_handle is not None:
            try:
                self._log_file_handle.close()
            except OSError:
                pass
            self._log_file_handle = None
