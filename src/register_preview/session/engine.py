"""Incremental input engine reconciling input-line edits with match policy.

Every edit of the input line ends in ``InputEngine.recompute``, whether it
comes from typing, a navigation command, or a host widget that edited the
line itself. One recompute:

1. collapses an overflow burst (two or more characters) to one character,
   keeping the newest one unless strict matching rejects it;
2. under strict matching, rejects a pattern naming no eligible register,
   clearing the line and showing "Not matching";
3. commits the pattern and, with a full pane open, moves the highlight to
   the matching line;
4. decides whether the session confirms without an explicit submit.
"""

from __future__ import annotations

from register_preview.commands import CommandDescriptor
from register_preview.config import PreviewMode, PreviewSettings
from register_preview.errors import Notice, SelectionValidationError
from register_preview.preview import PreviewRenderer
from register_preview.runtime import telemetry

from .input_line import InputLine
from .state import SessionExit, SessionState


class InputEngine:
    def __init__(
        self,
        state: SessionState,
        descriptor: CommandDescriptor,
        settings: PreviewSettings,
        input_line: InputLine,
        renderer: PreviewRenderer,
        *,
        logger_name: str | None = "register_preview.engine",
    ) -> None:
        self.state = state
        self.descriptor = descriptor
        self.settings = settings
        self.input_line = input_line
        self.renderer = renderer
        self._logger_name = logger_name

    @property
    def quick_only(self) -> bool:
        return self.settings.mode is PreviewMode.QUICK_ONLY

    def recompute(self) -> SessionState:
        state = self.state
        if state.done:
            return state
        raw = self.input_line.contents()
        with telemetry.span(
            "engine::recompute",
            logger_name=self._logger_name,
            metadata={"raw": raw, "pattern": state.pattern},
        ) as handle:
            pattern = self._resolve_overflow(raw) if len(raw) > 1 else raw

            if self._rejects(pattern):
                state.pattern = ""
                state.confirm_pending = False
                self.input_line.set_contents("")
                self.notify(Notice.not_matching())
                handle.add_metadata("outcome", "not_matching")
                return state

            state.pattern = pattern
            if self.renderer.is_open:
                self._sync_pane(pattern)
            else:
                self._without_pane(pattern)

            if not state.done and pattern and (state.confirm_pending or self.quick_only):
                self.confirm(pattern)
            handle.add_metadata("outcome", state.logical)
        return state

    def submit(self) -> SessionState:
        """Host accept action: confirm the committed pattern or fail."""

        state = self.state
        if state.done:
            return state
        if state.pattern:
            self.confirm(state.pattern)
        else:
            error = SelectionValidationError.empty_submit()
            state.exit = SessionExit.aborted(error)
            telemetry.record_event(
                "session.empty_submit", level="warning", logger_name=self._logger_name
            )
        return state

    def confirm(self, key: str) -> None:
        self.state.exit = SessionExit.confirmed(key)
        self.state.confirm_pending = False
        telemetry.record_event(
            "session.confirmed",
            data={"key": key, "action": self.descriptor.action.value},
            logger_name=self._logger_name,
        )

    def abort(self) -> None:
        if not self.state.done:
            self.state.exit = SessionExit.aborted()

    def notify(self, notice: Notice) -> None:
        self.state.notices.append(notice.text)
        self.input_line.message(notice.text)
        telemetry.record_event(
            "preview.notice",
            level="debug",
            data={"kind": notice.kind, "text": notice.text},
            logger_name=self._logger_name,
        )

    def _resolve_overflow(self, raw: str) -> str:
        previous, incoming = raw[0], raw[-1]
        if not self.descriptor.strict_match or incoming in self.state.filtered_keys:
            pattern = incoming
        else:
            pattern = previous
        if (
            pattern == incoming == previous
            and self.settings.mode is PreviewMode.CONFIRM_ON_REPEAT
        ):
            self.state.confirm_pending = True
        self.input_line.set_contents(pattern)
        return pattern

    def _rejects(self, pattern: str) -> bool:
        return (
            self.descriptor.strict_match
            and bool(pattern)
            and pattern not in self.state.filtered_keys
        )

    def _sync_pane(self, pattern: str) -> None:
        state = self.state
        if not self.renderer.navigable:
            return
        self.renderer.clear_highlights()
        state.highlight_index = None
        if not pattern:
            return
        index = self.renderer.find_line(pattern)
        if index is None:
            self.notify(Notice.empty_entry(pattern))
            return
        self.renderer.highlight(index)
        state.highlight_index = index
        self.notify(Notice.prompt(self.descriptor.prompt_message, pattern))

    def _without_pane(self, pattern: str) -> None:
        if not pattern or pattern not in self.state.filtered_keys:
            return
        self.notify(Notice.prompt(self.descriptor.prompt_message, pattern))
        if self.descriptor.action.needs_entries or self.settings.mode is PreviewMode.NEVER:
            self.confirm(pattern)


__all__ = ["InputEngine"]
