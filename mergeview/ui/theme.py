# mergeview/ui/theme.py
# Console theme: accent colors & diff line styles

from __future__ import annotations

from rich.theme import Theme, ThemeStackError

from ..mergeview_io.console import console

# secondary accent paired w/ each primary accent; unknown accents fall back to cyan
_SECONDARY = {
    "blue": "cyan",
    "cyan": "bright_cyan",
    "magenta": "bright_magenta",
    "green": "bright_green",
    "yellow": "bright_yellow",
    "red": "bright_red",
}


def get_mergeview_theme(accent: str = "blue") -> Theme:
    return Theme(
        {
            # standard semantic colors
            "success": "bold green",
            "warning": "yellow",
            "error": "bold red",
            "info": "cyan",
            "dim": "dim",
            "debug": "dim magenta",
            # mergeview accents
            "mv.accent": accent,
            "mv.accent2": _SECONDARY.get(accent, "cyan"),
            # diff rows
            "diff.addition": "green",
            "diff.deletion": "red",
            "diff.header": "bold cyan",
            "diff.context": "default",
            "diff.lineno": "dim",
        }
    )


# * Push theme onto the shared console (replaces a previously pushed theme)
def initialize_theme(accent: str = "blue") -> None:
    try:
        console.pop_theme()
    except ThemeStackError:
        pass  # no theme pushed yet
    console.push_theme(get_mergeview_theme(accent))
