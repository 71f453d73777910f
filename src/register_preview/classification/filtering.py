"""Projection of the register store onto a command's accepted types."""

from __future__ import annotations

from typing import AbstractSet, Optional

from register_preview.store import Entry, EntryStore

from .classifier import DEFAULT_CLASSIFIER, Tag, TypeClassifier, TypeTag


def accepts_all(accepted: AbstractSet[Tag]) -> bool:
    return TypeTag.ALL in accepted


def filter_entries(
    store: EntryStore,
    accepted: AbstractSet[Tag],
    *,
    classifier: Optional[TypeClassifier] = None,
) -> list[Entry]:
    entries = list(store.entries())
    if accepts_all(accepted):
        return entries
    active = classifier or DEFAULT_CLASSIFIER
    return [entry for entry in entries if active.classify(entry.value) in accepted]


def filter_keys(
    store: EntryStore,
    accepted: AbstractSet[Tag],
    *,
    classifier: Optional[TypeClassifier] = None,
) -> tuple[str, ...]:
    return tuple(
        entry.key for entry in filter_entries(store, accepted, classifier=classifier)
    )


__all__ = ["accepts_all", "filter_entries", "filter_keys"]
