from __future__ import annotations

from dataclasses import dataclass

from register_preview.classification import (
    TypeClassifier,
    TypeTag,
    classify,
    default_classifier,
    filter_entries,
    filter_keys,
)
from register_preview.store import (
    BufferRef,
    EntryStore,
    FileQuery,
    FileRef,
    FrameLayout,
    KeyMacro,
    Location,
    WindowLayout,
)


@dataclass(frozen=True)
class Rectangle:
    rows: tuple[str, ...]


def make_store() -> EntryStore:
    return EntryStore(
        {
            "a": "hi",
            "b": 3,
            "c": BufferRef("*scratch*"),
            "d": Location("notes.txt", 4),
            "e": 2.5,
            "f": KeyMacro(("x",)),
        }
    )


def test_builtin_and_extension_tags() -> None:
    assert classify("text") is TypeTag.TEXT
    assert classify(7) is TypeTag.NUMBER
    assert classify(1.5) is TypeTag.NUMBER
    assert classify(Location("b", 1)) is TypeTag.LOCATION
    assert classify(BufferRef("b")) is TypeTag.BUFFER_REF
    assert classify(FileRef("/tmp/x")) is TypeTag.FILE_PATH
    assert classify(FileQuery("/tmp/x", "needle")) is TypeTag.FILE_QUERY
    assert classify(WindowLayout(("w1",))) is TypeTag.WINDOW_LAYOUT
    assert classify(FrameLayout((WindowLayout(("w1",)),))) is TypeTag.FRAME_LAYOUT
    assert classify(KeyMacro(("a",))) is TypeTag.KEY_MACRO


def test_unmatched_values_are_unknown() -> None:
    assert classify(True) is TypeTag.UNKNOWN
    assert classify(None) is TypeTag.UNKNOWN
    assert classify(Rectangle(("ab",))) is TypeTag.UNKNOWN


def test_registered_rule_extends_without_touching_builtins() -> None:
    classifier = default_classifier()
    before = classifier.rules

    classifier.register(lambda value: isinstance(value, Rectangle), "rectangle")

    assert classifier.rules[: len(before)] == before
    assert classifier.classify(Rectangle(("ab",))) == "rectangle"
    assert classifier.classify("still text") is TypeTag.TEXT


def test_first_matching_rule_wins() -> None:
    classifier = TypeClassifier(rules=())
    classifier.register(lambda value: isinstance(value, int), "first")
    classifier.register(lambda value: isinstance(value, int), "second")

    assert classifier.classify(1) == "first"


def test_filter_keeps_store_order_for_accepted_types() -> None:
    store = make_store()

    entries = filter_entries(store, {TypeTag.NUMBER, TypeTag.TEXT})

    assert [entry.key for entry in entries] == ["a", "b", "e"]


def test_filter_all_returns_full_store() -> None:
    store = make_store()

    assert filter_keys(store, {TypeTag.ALL}) == store.keys()
    assert filter_keys(store, {TypeTag.ALL, TypeTag.TEXT}) == store.keys()


def test_filter_is_idempotent() -> None:
    store = make_store()
    accepted = {TypeTag.LOCATION, TypeTag.BUFFER_REF}

    once = filter_entries(store, accepted)
    twice = filter_entries(EntryStore({e.key: e.value for e in once}), accepted)

    assert once == twice
    assert [entry.key for entry in once] == ["c", "d"]


def test_filter_uses_supplied_classifier() -> None:
    classifier = default_classifier()
    classifier.register(lambda value: isinstance(value, Rectangle), "rectangle")
    store = EntryStore({"r": Rectangle(("ab",)), "t": "text"})

    assert filter_keys(store, {"rectangle"}, classifier=classifier) == ("r",)
    assert filter_keys(store, {"rectangle"}) == ()
