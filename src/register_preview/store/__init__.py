"""Register store and the structured values it holds."""

from .entries import Entry, EntryStore, suggest_default_key
from .values import (
    BufferRef,
    FileQuery,
    FileRef,
    FrameLayout,
    KeyMacro,
    Location,
    WindowLayout,
)

__all__ = [
    "Entry",
    "EntryStore",
    "suggest_default_key",
    "BufferRef",
    "FileQuery",
    "FileRef",
    "FrameLayout",
    "KeyMacro",
    "Location",
    "WindowLayout",
]
