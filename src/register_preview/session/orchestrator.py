"""Session orchestration: the entry point commands call to read a register."""

from __future__ import annotations

from contextlib import ExitStack
from typing import Dict, Iterable, Optional

from register_preview.classification import TypeClassifier, filter_entries
from register_preview.commands import (
    ActionKind,
    CommandDescriptor,
    DescriptorRegistry,
    load_default_descriptors,
)
from register_preview.config import PreviewMode, PreviewSettings
from register_preview.errors import (
    RegisterPreviewError,
    SelectionAborted,
    SelectionValidationError,
)
from register_preview.keymaps import KeyInput, KeymapResolver
from register_preview.preview import (
    Describe,
    NavigationController,
    PaneFactory,
    PreviewRenderer,
    describe_value,
)
from register_preview.runtime import telemetry
from register_preview.store import Entry, EntryStore, suggest_default_key

from .engine import InputEngine
from .input_line import InputLine
from .keymap import PICKER_MODE, default_resolver
from .state import SessionExit, SessionState


class SelectionSession:
    """One register read: owns the input line and at most one preview pane.

    Use as a context manager; leaving the block tears the session down exactly
    once, whatever the exit reason.
    """

    def __init__(
        self,
        *,
        command_id: Optional[str],
        prompt: str,
        descriptor: CommandDescriptor,
        store: EntryStore,
        entries: list[Entry],
        settings: PreviewSettings,
        input_line: InputLine,
        renderer: PreviewRenderer,
        resolver: KeymapResolver,
        replaying: bool = False,
    ) -> None:
        self.command_id = command_id
        self.prompt = prompt
        self.descriptor = descriptor
        self.store = store
        self.entries = entries
        self.settings = settings
        self.input_line = input_line
        self.renderer = renderer
        self.replaying = replaying
        self._resolver = resolver
        self._stack: Optional[ExitStack] = None
        self._torn_down = False
        self.logger = telemetry.get_logger("register_preview.session")
        self.state = SessionState(filtered_keys=tuple(entry.key for entry in entries))
        if descriptor.action is ActionKind.SET:
            self.state.default_key = suggest_default_key(store, settings.default_keys)
        self.engine = InputEngine(
            self.state, descriptor, settings, input_line, renderer
        )
        self.navigation = NavigationController(
            renderer, input_line, replaying=lambda: self.replaying
        )

    @property
    def done(self) -> bool:
        return self.state.done

    @property
    def quick_only(self) -> bool:
        return self.settings.mode is PreviewMode.QUICK_ONLY

    def flags(self) -> Dict[str, bool]:
        return {
            "preview_visible": self.renderer.navigable,
            "replaying": self.replaying,
            "quick_only": self.quick_only,
        }

    def open(self) -> "SelectionSession":
        if self._stack is not None:
            return self
        if self.descriptor.action.needs_entries and not self.entries:
            raise SelectionValidationError.no_suitable_entry(self.descriptor.action.value)
        stack = ExitStack()
        try:
            stack.enter_context(self.input_line.reading(self.prompt))
            stack.callback(self.renderer.close)
            mode = self.settings.mode
            if mode.opens_full_pane:
                self.renderer.open(self.entries, self.store)
            elif mode is PreviewMode.QUICK_ONLY:
                self.renderer.open(self.entries, self.store, navigable=False)
        except BaseException:
            stack.close()
            raise
        self._stack = stack
        self.state.preview_open = self.renderer.is_open
        telemetry.record_event(
            "session.start",
            data={
                "command": self.command_id or "",
                "mode": self.settings.mode.value,
                "eligible": len(self.entries),
                "preview": self.state.preview_open,
            },
        )
        return self

    def close(self) -> None:
        if self._torn_down:
            return
        self._torn_down = True
        stack, self._stack = self._stack, None
        if stack is not None:
            stack.close()
        self.state.preview_open = False
        exit_kind = self.state.exit.kind if self.state.exit else "aborted"
        telemetry.record_event(
            "session.finish",
            data={"command": self.command_id or "", "exit": exit_kind},
        )

    def __enter__(self) -> "SelectionSession":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc is not None and not self.state.done:
            error = exc if isinstance(exc, RegisterPreviewError) else None
            self.state.exit = SessionExit.aborted(error)
        self.close()

    def feed(self, key: KeyInput) -> SessionState:
        """Dispatch one key event through the picker keymap."""

        if self.done:
            return self.state
        result = self._resolver.resolve(PICKER_MODE, key.token, context=self.flags())
        if result.status == "match" and result.match:
            with telemetry.span(
                "keymaps::execute",
                component="keymaps",
                metadata={"binding_id": result.match.binding.id},
            ):
                result.match.action(self, result.match)
        elif key.text and len(key.text) == 1 and key.text.isprintable():
            self.input_line.insert(key.text)
            self.engine.recompute()
        self.state.preview_open = self.renderer.is_open
        return self.state

    def on_input_changed(self) -> SessionState:
        """Recompute after the host edited the input line directly."""

        self.engine.recompute()
        return self.state

    def reveal(self) -> bool:
        if self.replaying or self.quick_only or self.done:
            return False
        if not self.renderer.is_open:
            opened = self.renderer.open(self.entries, self.store, force_show_empty=True)
            if not opened:
                return False
            self.state.preview_open = True
            self.engine.recompute()
        return True

    def result(self) -> str:
        """Committed key, or raise the failure that ended the session."""

        exit_ = self.state.exit
        if exit_ is None:
            raise SelectionAborted("input ended before a register was chosen")
        if exit_.kind == "confirmed" and exit_.key is not None:
            return exit_.key
        if exit_.error is not None:
            raise exit_.error
        raise SelectionAborted()


class RegisterReader:
    """Reads one register key for a calling command."""

    def __init__(
        self,
        store: EntryStore,
        *,
        input_line: InputLine,
        pane_factory: PaneFactory,
        descriptors: Optional[DescriptorRegistry] = None,
        classifier: Optional[TypeClassifier] = None,
        settings: Optional[PreviewSettings] = None,
        describe: Describe = describe_value,
        resolver: Optional[KeymapResolver] = None,
    ) -> None:
        self.store = store
        self.input_line = input_line
        self.pane_factory = pane_factory
        if descriptors is None:
            descriptors = DescriptorRegistry(logger_name="register_preview.commands")
            load_default_descriptors(descriptors)
        self.descriptors = descriptors
        self.classifier = classifier
        self.settings = settings or PreviewSettings()
        self.describe = describe
        self.resolver = resolver or default_resolver()

    def begin(
        self,
        command_id: Optional[str],
        prompt: str,
        *,
        replaying: bool = False,
    ) -> SelectionSession:
        """Build a session for event-driven hosts; enter it to start reading."""

        descriptor = self.descriptors.lookup(command_id)
        entries = filter_entries(
            self.store, descriptor.accepted_types, classifier=self.classifier
        )
        renderer = PreviewRenderer(
            self.pane_factory, describe=self.describe, settings=self.settings
        )
        return SelectionSession(
            command_id=command_id,
            prompt=prompt,
            descriptor=descriptor,
            store=self.store,
            entries=entries,
            settings=self.settings,
            input_line=self.input_line,
            renderer=renderer,
            resolver=self.resolver,
            replaying=replaying,
        )

    def read(
        self,
        command_id: Optional[str],
        prompt: str,
        events: Iterable[KeyInput],
        *,
        replaying: bool = False,
    ) -> str:
        session = self.begin(command_id, prompt, replaying=replaying)
        with telemetry.span(
            "session::run",
            component="session",
            metadata={"command": command_id or "", "mode": self.settings.mode.value},
        ) as handle:
            with session:
                for event in events:
                    session.feed(event)
                    if session.done:
                        break
            key = session.result()
            handle.add_metadata("key", key)
            return key


__all__ = ["SelectionSession", "RegisterReader"]
