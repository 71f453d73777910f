"""Structured values a register can hold besides plain text and numbers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class Location:
    """A position inside a live buffer."""

    buffer: str
    offset: int


@dataclass(frozen=True, slots=True)
class BufferRef:
    """Reference to a buffer by name, restored by switching to it."""

    name: str


@dataclass(frozen=True, slots=True)
class FileRef:
    """Reference to a file path, restored by visiting it."""

    path: str


@dataclass(frozen=True, slots=True)
class FileQuery:
    """A file position recorded as a search query instead of an offset."""

    path: str
    query: str
    offset: Optional[int] = None


@dataclass(frozen=True, slots=True)
class WindowLayout:
    """Snapshot of the window split layout of one frame."""

    windows: Tuple[str, ...]
    selected: Optional[str] = None


@dataclass(frozen=True, slots=True)
class FrameLayout:
    """Snapshot of every frame and its window layout."""

    frames: Tuple[WindowLayout, ...]


@dataclass(frozen=True, slots=True)
class KeyMacro:
    """Recorded keyboard macro."""

    keys: Tuple[str, ...]


__all__ = [
    "Location",
    "BufferRef",
    "FileRef",
    "FileQuery",
    "WindowLayout",
    "FrameLayout",
    "KeyMacro",
]
