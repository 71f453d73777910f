"""Keymap actions available while a picker session is reading."""

from __future__ import annotations

from typing import TYPE_CHECKING

from register_preview.keymaps import ResolutionMatch

if TYPE_CHECKING:  # pragma: no cover
    from .orchestrator import SelectionSession


def submit(session: "SelectionSession", match: ResolutionMatch) -> None:
    del match
    session.engine.submit()


def abort(session: "SelectionSession", match: ResolutionMatch) -> None:
    del match
    session.engine.abort()


def next_entry(session: "SelectionSession", match: ResolutionMatch) -> None:
    del match
    if session.navigation.move_next() is not None:
        session.engine.recompute()


def previous_entry(session: "SelectionSession", match: ResolutionMatch) -> None:
    del match
    if session.navigation.move_previous() is not None:
        session.engine.recompute()


def reveal_preview(session: "SelectionSession", match: ResolutionMatch) -> None:
    del match
    session.reveal()


def insert_default(session: "SelectionSession", match: ResolutionMatch) -> None:
    del match
    key = session.state.default_key
    if key is None:
        return
    session.input_line.set_contents(key)
    session.engine.recompute()


def delete_backward(session: "SelectionSession", match: ResolutionMatch) -> None:
    del match
    session.input_line.delete_backward()
    session.engine.recompute()


__all__ = [
    "submit",
    "abort",
    "next_entry",
    "previous_entry",
    "reveal_preview",
    "insert_default",
    "delete_backward",
]
