"""Pane primitive the renderer draws into, plus an in-memory implementation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional, Protocol, Sequence


@dataclass(frozen=True, slots=True)
class PreviewLine:
    key: str
    description: str
    separator: str = ": "

    @property
    def text(self) -> str:
        return f"{self.key}{self.separator}{self.description}"


class Pane(Protocol):
    """Read-only auxiliary display owned by one session at a time."""

    @property
    def visible(self) -> bool: ...

    @property
    def lines(self) -> Sequence[PreviewLine]: ...

    @property
    def highlighted(self) -> Optional[int]: ...

    def render(self, lines: Sequence[PreviewLine]) -> None: ...

    def highlight(self, index: int) -> None: ...

    def clear_highlights(self) -> None: ...

    def close(self) -> None: ...


PaneFactory = Callable[[Mapping[str, object]], Pane]


@dataclass
class MemoryPane:
    """Headless pane that records what a host window would show."""

    placement: Mapping[str, object] = field(default_factory=dict)
    lines: List[PreviewLine] = field(default_factory=list)
    highlighted: Optional[int] = None
    visible: bool = False
    render_calls: int = 0
    close_calls: int = 0

    def render(self, lines: Sequence[PreviewLine]) -> None:
        self.lines = list(lines)
        self.highlighted = None
        self.visible = True
        self.render_calls += 1

    def highlight(self, index: int) -> None:
        if not 0 <= index < len(self.lines):
            raise IndexError(f"line {index} out of range")
        self.highlighted = index

    def clear_highlights(self) -> None:
        self.highlighted = None

    def close(self) -> None:
        self.close_calls += 1
        self.visible = False
        self.highlighted = None

    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)


class MemoryPaneFactory:
    """Pane factory that remembers every pane it created."""

    def __init__(self) -> None:
        self.created: List[MemoryPane] = []

    def __call__(self, placement: Mapping[str, object]) -> MemoryPane:
        pane = MemoryPane(placement=dict(placement))
        self.created.append(pane)
        return pane

    @property
    def last(self) -> Optional[MemoryPane]:
        return self.created[-1] if self.created else None


__all__ = ["PreviewLine", "Pane", "PaneFactory", "MemoryPane", "MemoryPaneFactory"]
