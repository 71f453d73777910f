"""Key bindings used while a picker session owns the input line."""

from .models import ActionRef, Binding, KeyInput, WhenClause, key_token
from .registry import KeymapConflictError, KeymapRegistry
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult

__all__ = [
    "ActionRef",
    "Binding",
    "KeyInput",
    "WhenClause",
    "key_token",
    "KeymapRegistry",
    "KeymapConflictError",
    "KeymapResolver",
    "ResolutionMatch",
    "ResolutionResult",
]
