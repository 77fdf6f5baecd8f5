# mergeview/core/debug.py
# Dev-mode tracing for the diff parser, line diffs & conflict tracker

from .output import get_output_manager, CATEGORY_DIFF, CATEGORY_CONFLICT


def is_debug_enabled() -> bool:
    return get_output_manager().is_debug_enabled()


def debug_print(message: str, category: str = "DEBUG") -> None:
    get_output_manager().debug(message, category)


def debug_diff(message: str) -> None:
    debug_print(message, CATEGORY_DIFF)


def debug_conflict(message: str) -> None:
    debug_print(message, CATEGORY_CONFLICT)
