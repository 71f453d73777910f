"""Default picker keymap."""

from __future__ import annotations

from typing import Iterable

from register_preview.keymaps import (
    ActionRef,
    Binding,
    KeymapRegistry,
    KeymapResolver,
    WhenClause,
)

from . import actions

PICKER_MODE = "register_preview"

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef("picker.submit", actions.submit, "Confirm the typed register"),
    ActionRef("picker.abort", actions.abort, "Quit without choosing"),
    ActionRef("picker.next", actions.next_entry, "Highlight the next register"),
    ActionRef("picker.previous", actions.previous_entry, "Highlight the previous register"),
    ActionRef("picker.reveal", actions.reveal_preview, "Show the preview pane"),
    ActionRef("picker.default", actions.insert_default, "Insert the suggested free register"),
    ActionRef("picker.delete", actions.delete_backward, "Delete the typed character"),
)

_NAVIGABLE = (WhenClause("preview_visible"), WhenClause.parse("!replaying"))
_REVEAL = (WhenClause.parse("!replaying"), WhenClause.parse("!quick_only"))


def _bind(key: str, action_id: str, when: Iterable[WhenClause] = ()) -> Binding:
    return Binding(
        id=f"{PICKER_MODE}.{key}",
        mode=PICKER_MODE,
        key=key,
        action_id=action_id,
        when=tuple(when),
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("enter", "picker.submit"),
    _bind("escape", "picker.abort"),
    _bind("ctrl+g", "picker.abort"),
    _bind("ctrl+n", "picker.next", _NAVIGABLE),
    _bind("down", "picker.next", _NAVIGABLE),
    _bind("ctrl+p", "picker.previous", _NAVIGABLE),
    _bind("up", "picker.previous", _NAVIGABLE),
    _bind("ctrl+h", "picker.reveal", _REVEAL),
    _bind("f1", "picker.reveal", _REVEAL),
    _bind("alt+n", "picker.default"),
    _bind("backspace", "picker.delete"),
)


def load_picker_keymap(registry: KeymapRegistry) -> None:
    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=True)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding, replace=True)


def default_resolver() -> KeymapResolver:
    registry = KeymapRegistry(logger_name="register_preview.keymaps")
    load_picker_keymap(registry)
    return KeymapResolver(registry)


__all__ = [
    "PICKER_MODE",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "load_picker_keymap",
    "default_resolver",
]
