"""Executable Textual demo hosting the register picker."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use register_preview.adapters.textual.app"
    ) from exc

from register_preview.config import PreviewMode, PreviewSettings
from register_preview.errors import RegisterPreviewError
from register_preview.preview import PreviewLine
from register_preview.session import RegisterReader
from register_preview.store import (
    BufferRef,
    EntryStore,
    FileRef,
    KeyMacro,
    Location,
    WindowLayout,
)

from .controller import HookInputLine, HookPane, PickerUIHooks, TextualPickerAdapter

# Demo key -> (command id, prompt)
DEMO_COMMANDS: dict[str, Tuple[str, str]] = {
    "i": ("insert-register", "Insert register: "),
    "j": ("jump-to-register", "Jump to register: "),
    "v": ("view-register", "View register: "),
    "a": ("append-to-register", "Append to register: "),
    "s": ("copy-to-register", "Copy to register: "),
}


def create_demo_store() -> EntryStore:
    return EntryStore(
        {
            "a": "hello from register a",
            "b": 42,
            "c": Location(buffer="notes.txt", offset=128),
            "d": BufferRef("*scratch*"),
            "f": FileRef("~/projects/register-preview/DESIGN.md"),
            "w": WindowLayout(windows=("notes.txt", "*scratch*")),
            "k": KeyMacro(keys=("ctrl+a", "h", "i")),
        }
    )


@dataclass
class UIState:
    pane_lines: Tuple[PreviewLine, ...] = ()
    highlighted: Optional[int] = None
    input_text: str = ""
    status_text: str = ""


class RegisterPreviewApp(App[None]):
    """Minimal Textual UI running picker sessions against a demo store."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#preview-pane {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#input-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, settings: Optional[PreviewSettings] = None) -> None:
        super().__init__()
        self._state = UIState()
        self._settings = settings or PreviewSettings.from_env()
        self.store = create_demo_store()
        self.adapter: TextualPickerAdapter | None = None
        self._pane_widget: Static | None = None
        self._status_widget: Static | None = None
        self._input_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="preview-area"):
            self._pane_widget = Static("", id="preview-pane")
            yield self._pane_widget
        self._status_widget = Static("", id="status-line")
        self._input_widget = Static("", id="input-line")
        yield self._status_widget
        yield self._input_widget
        yield Footer()

    async def on_mount(self) -> None:
        hooks = PickerUIHooks(
            render_pane=self._render_pane,
            highlight=self._highlight,
            close_pane=self._close_pane,
            show_input=self._show_input,
            show_message=self._update_status,
            finished=self._finished,
        )
        self.adapter = TextualPickerAdapter(self._make_reader, hooks)
        self._update_status(self._help_text())

    def _make_reader(
        self, input_line: HookInputLine, pane_factory: Callable[..., HookPane]
    ) -> RegisterReader:
        return RegisterReader(
            self.store,
            input_line=input_line,
            pane_factory=pane_factory,
            settings=self._settings,
        )

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        if self.adapter.active:
            self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
            event.stop()
            return
        command = DEMO_COMMANDS.get(key)
        if command is not None:
            self.adapter.start(*command)
            event.stop()

    def _render_pane(self, lines: Sequence[PreviewLine]) -> None:
        self._state.pane_lines = tuple(lines)
        self._state.highlighted = None
        self._redraw_pane()

    def _highlight(self, index: Optional[int]) -> None:
        self._state.highlighted = index
        self._redraw_pane()

    def _close_pane(self) -> None:
        self._state.pane_lines = ()
        self._state.highlighted = None
        self._redraw_pane()

    def _redraw_pane(self) -> None:
        if not self._pane_widget:
            return
        rendered = []
        for index, line in enumerate(self._state.pane_lines):
            text = line.text.replace("[", r"\[")
            if index == self._state.highlighted:
                text = f"[reverse]{text}[/reverse]"
            rendered.append(text)
        self._pane_widget.update("\n".join(rendered))

    def _show_input(self, prompt: str, text: str) -> None:
        self._state.input_text = f"{prompt}{text}"
        if self._input_widget:
            self._input_widget.update(self._state.input_text)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _finished(
        self, command_id: str, key: Optional[str], error: Optional[RegisterPreviewError]
    ) -> None:
        self._show_input("", "")
        if error is not None or key is None:
            self._update_status(f"{command_id}: {error or 'quit'}")
            return
        value = self.store.get(key)
        if command_id == "copy-to-register":
            self.store.set(key, f"copied at {len(self.store)}")
        elif command_id == "append-to-register" and isinstance(value, str):
            self.store.set(key, value + " +")
        self._update_status(f"{command_id} -> {key}: {self.store.get(key)!r}")

    @staticmethod
    def _help_text() -> str:
        return "  ".join(f"{key}={command}" for key, (command, _) in DEMO_COMMANDS.items())

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key in {"ctrl+c", "ctrl+q"}:
            return None
        if event.character and event.is_printable:
            return (event.character, event.character, ())
        # Textual already reports modifiers inside the key name ("ctrl+n").
        parts = key.split("+")
        return (parts[-1], None, tuple(parts[:-1]))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the register preview demo.")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in PreviewMode],
        default=os.environ.get("REGISTER_PREVIEW_MODE", PreviewMode.ALWAYS.value),
        help="Preview pane mode (default: always)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    settings = PreviewSettings.from_env().replace(mode=PreviewMode(args.mode))
    app = RegisterPreviewApp(settings=settings)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
