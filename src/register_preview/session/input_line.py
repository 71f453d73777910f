"""Input-line primitive a session reads the register key from."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import ContextManager, Iterator, List, Protocol


class InputLine(Protocol):
    def contents(self) -> str: ...

    def set_contents(self, text: str) -> None: ...

    def insert(self, text: str) -> None: ...

    def delete_backward(self) -> None: ...

    def message(self, text: str) -> None: ...

    def reading(self, prompt: str) -> ContextManager[object]:
        """Enter a (possibly nested) read; restores the outer line on exit."""
        ...


@dataclass(slots=True)
class _Frame:
    prompt: str
    text: str


class MemoryInputLine:
    """In-memory input line; nested reads stash the outer line's contents."""

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._prompt = ""
        self._frames: List[_Frame] = []
        self.messages: List[str] = []

    @property
    def prompt(self) -> str:
        return self._prompt

    @property
    def depth(self) -> int:
        return len(self._frames)

    def contents(self) -> str:
        return self._text

    def set_contents(self, text: str) -> None:
        self._text = text

    def insert(self, text: str) -> None:
        self._text += text

    def delete_backward(self) -> None:
        self._text = self._text[:-1]

    def message(self, text: str) -> None:
        self.messages.append(text)

    @property
    def last_message(self) -> str | None:
        return self.messages[-1] if self.messages else None

    @contextmanager
    def reading(self, prompt: str) -> Iterator["MemoryInputLine"]:
        self._frames.append(_Frame(self._prompt, self._text))
        self._prompt, self._text = prompt, ""
        try:
            yield self
        finally:
            frame = self._frames.pop()
            self._prompt, self._text = frame.prompt, frame.text


__all__ = ["InputLine", "MemoryInputLine"]
