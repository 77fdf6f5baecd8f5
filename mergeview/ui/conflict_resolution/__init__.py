# mergeview/ui/conflict_resolution/__init__.py
# Interactive conflict resolution components

from .resolver_display import InteractiveConflictResolver, ResolverResult
from .resolver_renderer import ResolverRenderer, create_renderer_from_console
from .resolver_state import (
    ResolverViewState,
    ResolverStateManager,
    ResolverMode,
    OPTIONS,
    OUTCOME_FINALIZED,
    OUTCOME_CANCELLED,
)
from .resolver_input import ResolverInputHandler

__all__ = [
    "InteractiveConflictResolver",
    "ResolverResult",
    "ResolverRenderer",
    "create_renderer_from_console",
    "ResolverViewState",
    "ResolverStateManager",
    "ResolverMode",
    "ResolverInputHandler",
    "OPTIONS",
    "OUTCOME_FINALIZED",
    "OUTCOME_CANCELLED",
]
