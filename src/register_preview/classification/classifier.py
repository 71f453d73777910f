"""Ordered predicate dispatch from register values to type tags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from numbers import Number
from typing import Callable, Iterable, Optional

from register_preview.runtime.telemetry import span
from register_preview.store.values import (
    BufferRef,
    FileQuery,
    FileRef,
    FrameLayout,
    KeyMacro,
    Location,
    WindowLayout,
)


class TypeTag(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    LOCATION = "location"
    BUFFER_REF = "buffer"
    FILE_PATH = "file"
    FILE_QUERY = "file-query"
    WINDOW_LAYOUT = "window"
    FRAME_LAYOUT = "frame"
    KEY_MACRO = "kmacro"
    UNKNOWN = "unknown"
    ALL = "all"


# Extension rules may use plain string tags.
Tag = str
Predicate = Callable[[object], bool]


@dataclass(frozen=True, slots=True)
class TypeRule:
    predicate: Predicate
    tag: Tag
    name: str = ""


def _is_text(value: object) -> bool:
    return isinstance(value, str)


def _is_number(value: object) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _instance_of(kind: type) -> Predicate:
    return lambda value: isinstance(value, kind)


BUILTIN_RULES: tuple[TypeRule, ...] = (
    TypeRule(_is_text, TypeTag.TEXT, "text"),
    TypeRule(_is_number, TypeTag.NUMBER, "number"),
    TypeRule(_instance_of(Location), TypeTag.LOCATION, "location"),
    TypeRule(_instance_of(BufferRef), TypeTag.BUFFER_REF, "buffer"),
    TypeRule(_instance_of(FileRef), TypeTag.FILE_PATH, "file"),
    TypeRule(_instance_of(FileQuery), TypeTag.FILE_QUERY, "file-query"),
    TypeRule(_instance_of(WindowLayout), TypeTag.WINDOW_LAYOUT, "window"),
)


class TypeClassifier:
    """First matching rule wins; extensions run after the built-ins in order."""

    def __init__(
        self,
        rules: Iterable[TypeRule] = BUILTIN_RULES,
        *,
        logger_name: str | None = None,
    ) -> None:
        self._builtin: tuple[TypeRule, ...] = tuple(rules)
        self._extensions: list[TypeRule] = []
        self._logger_name = logger_name

    @property
    def rules(self) -> tuple[TypeRule, ...]:
        return self._builtin + tuple(self._extensions)

    def register(
        self, predicate: Predicate, tag: Tag, *, name: Optional[str] = None
    ) -> TypeRule:
        if not callable(predicate):
            raise TypeError("predicate must be callable")
        if not tag:
            raise ValueError("tag cannot be empty")
        rule = TypeRule(predicate, tag, name or str(tag))
        with span(
            "classifier::register",
            logger_name=self._logger_name,
            component="classification",
            metadata={"tag": str(tag), "position": len(self.rules)},
        ):
            self._extensions.append(rule)
        return rule

    def classify(self, value: object) -> Tag:
        for rule in self._builtin:
            if rule.predicate(value):
                return rule.tag
        for rule in self._extensions:
            if rule.predicate(value):
                return rule.tag
        return TypeTag.UNKNOWN


def default_classifier() -> TypeClassifier:
    classifier = TypeClassifier(logger_name="register_preview.classification")
    classifier.register(_instance_of(FrameLayout), TypeTag.FRAME_LAYOUT, name="frame")
    classifier.register(_instance_of(KeyMacro), TypeTag.KEY_MACRO, name="kmacro")
    return classifier


DEFAULT_CLASSIFIER = default_classifier()


def classify(value: object) -> Tag:
    return DEFAULT_CLASSIFIER.classify(value)


def register_type(predicate: Predicate, tag: Tag, *, name: Optional[str] = None) -> TypeRule:
    """Append a rule to the shared classifier."""

    return DEFAULT_CLASSIFIER.register(predicate, tag, name=name)


__all__ = [
    "TypeTag",
    "Tag",
    "TypeRule",
    "TypeClassifier",
    "BUILTIN_RULES",
    "DEFAULT_CLASSIFIER",
    "default_classifier",
    "classify",
    "register_type",
]
