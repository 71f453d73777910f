from __future__ import annotations

from typing import Any, Callable, List, Optional

import pytest

from register_preview.adapters.textual import (
    HookInputLine,
    HookPane,
    PickerUIHooks,
    TextualPickerAdapter,
)
from register_preview.config import PreviewMode, PreviewSettings
from register_preview.errors import SelectionAborted
from register_preview.session import RegisterReader
from register_preview.store import EntryStore, Location


def make_store() -> EntryStore:
    return EntryStore({"a": "hello", "j": Location("notes.txt", 10)})


def make_adapter(
    hooks: PickerUIHooks,
    *,
    store: Optional[EntryStore] = None,
    mode: PreviewMode = PreviewMode.ALWAYS,
) -> TextualPickerAdapter:
    def factory(
        input_line: HookInputLine, pane_factory: Callable[..., HookPane]
    ) -> RegisterReader:
        return RegisterReader(
            store if store is not None else make_store(),
            input_line=input_line,
            pane_factory=pane_factory,
            settings=PreviewSettings(mode=mode),
        )

    return TextualPickerAdapter(factory, hooks)


def test_adapter_renders_pane_and_highlights() -> None:
    panes: List[List[str]] = []
    highlights: List[Optional[int]] = []
    hooks = PickerUIHooks(
        render_pane=lambda lines: panes.append([line.text for line in lines]),
        highlight=lambda index: highlights.append(index),
    )
    adapter = make_adapter(hooks)

    assert adapter.start("copy-to-register", "Copy: ")
    adapter.handle_textual_key("down", modifiers=())

    assert panes == [["a: hello", "j: buffer position: buffer notes.txt, position 10"]]
    assert highlights[-1] == 0


def test_adapter_reports_finished_key() -> None:
    finished: List[tuple[str, Optional[str], Any]] = []
    inputs: List[str] = []
    hooks = PickerUIHooks(
        render_pane=lambda lines: None,
        show_input=lambda prompt, text: inputs.append(f"{prompt}{text}"),
        finished=lambda command, key, error: finished.append((command, key, error)),
    )
    adapter = make_adapter(hooks, mode=PreviewMode.NEVER)

    adapter.start("jump-to-register", "Jump: ")
    adapter.handle_textual_key("j", text="j")

    assert finished == [("jump-to-register", "j", None)]
    assert not adapter.active
    assert "Jump: j" in inputs


def test_adapter_surfaces_precondition_failure() -> None:
    messages: List[str] = []
    finished: List[tuple[str, Optional[str], Any]] = []
    hooks = PickerUIHooks(
        render_pane=lambda lines: None,
        show_message=lambda text: messages.append(text),
        finished=lambda command, key, error: finished.append((command, key, error)),
    )
    adapter = make_adapter(hooks, store=EntryStore())

    assert adapter.start("insert-register", "Insert: ") is False

    assert messages == ["no entry suitable for `insert`"]
    assert finished[0][1] is None
    assert not adapter.active


def test_adapter_closes_pane_on_escape() -> None:
    closed: List[bool] = []
    finished: List[tuple[str, Optional[str], Any]] = []
    hooks = PickerUIHooks(
        render_pane=lambda lines: None,
        close_pane=lambda: closed.append(True),
        finished=lambda command, key, error: finished.append((command, key, error)),
    )
    adapter = make_adapter(hooks)

    adapter.start("view-register", "View: ")
    adapter.handle_textual_key("escape")

    assert closed == [True]
    assert finished[0][:2] == ("view-register", None)


def test_adapter_tears_down_when_a_hook_raises() -> None:
    closed: List[bool] = []
    finished: List[tuple[str, Optional[str], Any]] = []

    def broken_highlight(index: Optional[int]) -> None:
        if index is not None:
            raise RuntimeError("widget gone")

    hooks = PickerUIHooks(
        render_pane=lambda lines: None,
        highlight=broken_highlight,
        close_pane=lambda: closed.append(True),
        finished=lambda command, key, error: finished.append((command, key, error)),
    )
    adapter = make_adapter(hooks)

    assert adapter.start("copy-to-register", "Copy: ")
    with pytest.raises(RuntimeError, match="widget gone"):
        adapter.handle_textual_key("a", text="a")

    assert not adapter.active
    assert closed == [True]
    assert adapter.input_line.depth == 0
    assert finished[0][:2] == ("copy-to-register", None)
    assert isinstance(finished[0][2], SelectionAborted)
    assert adapter.start("copy-to-register", "Copy: ")


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    hooks = PickerUIHooks(render_pane=lambda lines: None, log=logs.append)
    adapter = make_adapter(hooks)

    adapter.start("copy-to-register", "Copy: ")
    adapter.handle_textual_key("a", text="a")

    assert any(line.startswith("key ->") for line in logs)
    assert any("pattern='a'" in line for line in logs)
