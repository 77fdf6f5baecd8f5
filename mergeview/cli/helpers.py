# mergeview/cli/helpers.py
# Shared CLI helpers for environment detection & styled status lines

from __future__ import annotations

import os
import sys

from ..mergeview_io.console import console


# * Detect if running in test environment to avoid TTY-dependent features
def is_test_environment() -> bool:
    # check for pytest environment variable
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True

    # check for typer test runner indicators
    if os.environ.get("NO_COLOR") == "1" and os.environ.get("TERM") == "dumb":
        return True

    return False


# * Interactive resolver needs a real terminal & must be enabled in settings
def can_run_interactive(enabled: bool) -> bool:
    if not enabled or is_test_environment():
        return False
    return sys.stdin.isatty()


def print_setting_line(key: str, value: str) -> None:
    console.print(f"  [mv.accent]{key}[/][dim]:[/] [mv.accent2]{value}[/]")


def print_success(message: str, detail: str | None = None) -> None:
    suffix = f" {detail}" if detail else ""
    console.print(f"[success]✓[/] {message}{suffix}")


def print_warning(message: str) -> None:
    console.print(f"[warning]![/] {message}")
