"""Ordered register store read by picker sessions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Optional


def _check_key(key: str) -> str:
    if not isinstance(key, str) or len(key) != 1:
        raise ValueError(f"register key must be a single character, got {key!r}")
    return key


@dataclass(frozen=True, slots=True)
class Entry:
    key: str
    value: object


class EntryStore:
    """Insertion-ordered ``key -> value`` mapping; order is display order.

    Hosts mutate the store; sessions only read it and must tolerate keys
    disappearing between a snapshot and a later lookup.
    """

    def __init__(self, values: Optional[Mapping[str, object]] = None) -> None:
        self._values: Dict[str, object] = {}
        for key, value in (values or {}).items():
            self.set(key, value)

    def get(self, key: str) -> Optional[object]:
        return self._values.get(key)

    def set(self, key: str, value: object) -> None:
        self._values[_check_key(key)] = value

    def remove(self, key: str) -> Optional[object]:
        return self._values.pop(key, None)

    def keys(self) -> tuple[str, ...]:
        return tuple(self._values)

    def entries(self) -> Iterator[Entry]:
        for key, value in list(self._values.items()):
            yield Entry(key=key, value=value)

    def snapshot(self) -> tuple[Entry, ...]:
        return tuple(self.entries())

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._values))


def suggest_default_key(store: EntryStore, candidates: tuple[str, ...]) -> Optional[str]:
    """First candidate key that is not already in use."""

    for key in candidates:
        if key not in store:
            return key
    return None


__all__ = ["Entry", "EntryStore", "suggest_default_key"]
