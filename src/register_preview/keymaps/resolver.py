"""Resolves a single key token against the registry for one mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Mapping, Optional

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Indexes bindings by token per mode, rebuilt when the registry changes."""

    def __init__(self, registry: KeymapRegistry) -> None:
        self._registry = registry
        self._cache: Dict[str, tuple[int, Dict[str, list[Binding]]]] = {}

    def resolve(
        self,
        mode: str,
        token: str,
        *,
        context: Optional[Mapping[str, bool]] = None,
    ) -> ResolutionResult:
        flags = context or {}
        candidates = [
            binding
            for binding in self._index(mode).get(token, ())
            if binding.allows(flags)
        ]
        if not candidates:
            return ResolutionResult(status="miss")
        candidates.sort(key=lambda b: (-b.priority, b.id))
        binding = candidates[0]
        action = self._registry.get_action(binding.action_id)
        return ResolutionResult(
            status="match", match=ResolutionMatch(binding=binding, action=action)
        )

    def _index(self, mode: str) -> Dict[str, list[Binding]]:
        revision = self._registry.revision()
        cached = self._cache.get(mode)
        if cached and cached[0] == revision:
            return cached[1]
        index: Dict[str, list[Binding]] = {}
        for binding in self._registry.iter_bindings(mode):
            index.setdefault(binding.key, []).append(binding)
        self._cache[mode] = (revision, index)
        return index


__all__ = ["KeymapResolver", "ResolutionMatch", "ResolutionResult"]
