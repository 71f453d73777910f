"""Hook-driven adapter letting a Textual UI host picker sessions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from register_preview.errors import RegisterPreviewError
from register_preview.keymaps import KeyInput
from register_preview.preview import PreviewLine
from register_preview.session import (
    MemoryInputLine,
    RegisterReader,
    SelectionSession,
    SessionState,
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class PickerUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    render_pane: Callable[[Sequence[PreviewLine]], None]
    highlight: Callable[[Optional[int]], None] = _noop
    close_pane: Callable[[], None] = _noop
    show_input: Callable[[str, str], None] = _noop
    show_message: Callable[[str], None] = _noop
    finished: Callable[[str, Optional[str], Optional[RegisterPreviewError]], None] = _noop
    log: Callable[[str], None] = _noop


class HookPane:
    """Pane whose drawing is delegated to UI hooks."""

    def __init__(self, hooks: PickerUIHooks, placement: Mapping[str, object]) -> None:
        self._hooks = hooks
        self.placement = dict(placement)
        self.lines: List[PreviewLine] = []
        self.highlighted: Optional[int] = None
        self.visible = False

    def render(self, lines: Sequence[PreviewLine]) -> None:
        self.lines = list(lines)
        self.highlighted = None
        self.visible = True
        self._hooks.render_pane(self.lines)

    def highlight(self, index: int) -> None:
        self.highlighted = index
        self._hooks.highlight(index)

    def clear_highlights(self) -> None:
        if self.highlighted is not None:
            self.highlighted = None
            self._hooks.highlight(None)

    def close(self) -> None:
        if self.visible:
            self.visible = False
            self._hooks.close_pane()


class HookInputLine(MemoryInputLine):
    """Input line mirroring every change to the host widget."""

    def __init__(self, hooks: PickerUIHooks) -> None:
        super().__init__()
        self._hooks = hooks

    def set_contents(self, text: str) -> None:
        super().set_contents(text)
        self._hooks.show_input(self.prompt, text)

    def insert(self, text: str) -> None:
        super().insert(text)
        self._hooks.show_input(self.prompt, self.contents())

    def delete_backward(self) -> None:
        super().delete_backward()
        self._hooks.show_input(self.prompt, self.contents())

    def message(self, text: str) -> None:
        super().message(text)
        self._hooks.show_message(text)


class TextualPickerAdapter:
    """Runs one picker session at a time and feeds it Textual key events."""

    def __init__(
        self,
        reader_factory: Callable[[HookInputLine, Callable[..., HookPane]], RegisterReader],
        hooks: PickerUIHooks,
    ) -> None:
        self.hooks = hooks
        self.input_line = HookInputLine(hooks)
        self.reader = reader_factory(self.input_line, self._make_pane)
        self.session: Optional[SelectionSession] = None
        self._command_id = ""

    @property
    def active(self) -> bool:
        return self.session is not None

    def start(self, command_id: str, prompt: str, *, replaying: bool = False) -> bool:
        """Open a session; returns ``False`` when it failed before reading."""

        if self.session is not None:
            raise RuntimeError("a picker session is already active")
        session = self.reader.begin(command_id, prompt, replaying=replaying)
        self._command_id = command_id
        try:
            session.open()
        except RegisterPreviewError as exc:
            self._log_state("start failed", command=command_id, error=str(exc))
            self.hooks.show_message(str(exc))
            self.hooks.finished(command_id, None, exc)
            return False
        self.session = session
        self.hooks.show_input(prompt, self.input_line.contents())
        self._log_state("start", command=command_id)
        return True

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[SessionState]:
        if self.session is None:
            return None
        event = KeyInput(key=key, text=text, modifiers=tuple(modifiers))
        self._log_state("key ->", token=event.token, text=text)
        session = self.session
        try:
            state = session.feed(event)
        except Exception as exc:
            self._log_state("key failed", error=repr(exc))
            session.engine.abort()
            self._finish()
            raise
        self._log_state("state <-", pattern=state.pattern, logical=state.logical)
        if state.done:
            self._finish()
        return state

    def cancel(self) -> None:
        if self.session is not None:
            self.session.engine.abort()
            self._finish()

    def _finish(self) -> None:
        session, self.session = self.session, None
        if session is None:
            return
        session.close()
        key: Optional[str] = None
        error: Optional[RegisterPreviewError] = None
        try:
            key = session.result()
        except RegisterPreviewError as exc:
            error = exc
            self.hooks.show_message(str(exc))
        self._log_state("finish", command=self._command_id, key=key, error=error)
        self.hooks.finished(self._command_id, key, error)

    def _make_pane(self, placement: Mapping[str, object]) -> HookPane:
        return HookPane(self.hooks, placement)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {"active": self.session is not None}
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["TextualPickerAdapter", "PickerUIHooks", "HookPane", "HookInputLine"]
