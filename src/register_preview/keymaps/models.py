"""Dataclasses describing picker key bindings and their actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping


def normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


def key_token(key: str, modifiers: Iterable[str] = ()) -> str:
    """Canonical ``mod+mod+key`` token used as the binding lookup key."""

    if not key:
        raise ValueError("key cannot be empty")
    mods = normalize_modifiers(modifiers)
    return "+".join(mods + (key,)) if mods else key


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Normalized key event delivered to a picker session."""

    key: str
    modifiers: tuple[str, ...] = ()
    text: str | None = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        return key_token(self.key, self.modifiers)

    @classmethod
    def char(cls, text: str) -> "KeyInput":
        return cls(key=text, text=text)


@dataclass(frozen=True, slots=True)
class WhenClause:
    """Boolean flag condition gating a binding, ``!flag`` negates."""

    flag: str
    expected: bool = True

    def __post_init__(self) -> None:
        if not self.flag:
            raise ValueError("flag cannot be empty")

    @classmethod
    def parse(cls, expression: str) -> "WhenClause":
        expr = expression.strip()
        if not expr:
            raise ValueError("expression cannot be empty")
        if expr.startswith("!"):
            return cls(expr[1:], False)
        return cls(expr, True)

    def evaluate(self, context: Mapping[str, bool]) -> bool:
        return bool(context.get(self.flag, False)) is self.expected


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named callable a binding dispatches to."""

    id: str
    handler: Callable[..., object]
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Maps one key token in a mode to an action, optionally gated."""

    id: str
    mode: str
    key: str
    action_id: str
    description: str = ""
    when: tuple[WhenClause, ...] = ()
    priority: int = 0

    def __post_init__(self) -> None:
        for name in ("id", "mode", "key", "action_id"):
            if not getattr(self, name):
                raise ValueError(f"binding {name} cannot be empty")
        normalized = tuple(
            clause if isinstance(clause, WhenClause) else WhenClause.parse(str(clause))
            for clause in self.when
        )
        object.__setattr__(self, "when", normalized)

    @property
    def when_map(self) -> Mapping[str, bool]:
        return MappingProxyType({clause.flag: clause.expected for clause in self.when})

    def allows(self, context: Mapping[str, bool]) -> bool:
        return all(clause.evaluate(context) for clause in self.when)


__all__ = [
    "KeyInput",
    "WhenClause",
    "ActionRef",
    "Binding",
    "key_token",
    "normalize_modifiers",
]
