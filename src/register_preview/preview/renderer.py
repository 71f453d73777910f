"""Renders eligible registers into a pane, one line per register."""

from __future__ import annotations

from typing import Iterable, List, Optional

from register_preview.config import PreviewSettings
from register_preview.runtime import telemetry
from register_preview.store import Entry, EntryStore

from .describe import Describe, describe_value, truncate
from .pane import Pane, PaneFactory, PreviewLine


class PreviewRenderer:
    """Owns at most one pane per session; ``close`` is idempotent.

    A renderer that has been closed never reopens, so a session's pane goes
    from open to closed at most once.
    """

    def __init__(
        self,
        pane_factory: PaneFactory,
        *,
        describe: Describe = describe_value,
        settings: Optional[PreviewSettings] = None,
        logger_name: str | None = "register_preview.preview",
    ) -> None:
        self._factory = pane_factory
        self._describe = describe
        self._settings = settings or PreviewSettings()
        self._logger_name = logger_name
        self._pane: Optional[Pane] = None
        self._navigable = False
        self._closed = False

    @property
    def pane(self) -> Optional[Pane]:
        return self._pane

    @property
    def is_open(self) -> bool:
        return self._pane is not None and self._pane.visible

    @property
    def navigable(self) -> bool:
        """Open full pane supporting highlight and navigation."""

        return self.is_open and self._navigable

    @property
    def closed(self) -> bool:
        return self._closed

    def build_lines(self, entries: Iterable[Entry], store: EntryStore) -> List[PreviewLine]:
        lines: List[PreviewLine] = []
        for entry in entries:
            value = store.get(entry.key)
            if value is None:
                continue
            description = truncate(
                self._describe(value), self._settings.max_description
            )
            lines.append(
                PreviewLine(entry.key, description, separator=self._settings.separator)
            )
        return lines

    def open(
        self,
        entries: Iterable[Entry],
        store: EntryStore,
        *,
        force_show_empty: bool = False,
        navigable: bool = True,
    ) -> bool:
        if self._closed:
            return False
        if self.is_open:
            return True
        lines = self.build_lines(entries, store)
        with telemetry.span(
            "preview::open",
            logger_name=self._logger_name,
            component="preview",
            metadata={"lines": len(lines), "navigable": navigable},
        ) as handle:
            if not lines and not force_show_empty:
                handle.add_metadata("skipped", "empty")
                return False
            pane = self._factory(self._settings.placement)
            pane.render(lines)
            self._pane = pane
            self._navigable = navigable
            return True

    def find_line(self, key: str) -> Optional[int]:
        if self._pane is None:
            return None
        for index, line in enumerate(self._pane.lines):
            if line.key == key:
                return index
        return None

    def key_at(self, index: int) -> str:
        if self._pane is None:
            raise IndexError("preview pane is not open")
        return self._pane.lines[index].key

    def line_count(self) -> int:
        return len(self._pane.lines) if self._pane is not None else 0

    def highlighted(self) -> Optional[int]:
        return self._pane.highlighted if self._pane is not None else None

    def highlight(self, index: int) -> None:
        if self._pane is not None:
            self._pane.clear_highlights()
            self._pane.highlight(index)

    def clear_highlights(self) -> None:
        if self._pane is not None:
            self._pane.clear_highlights()

    def close(self) -> None:
        self._closed = True
        pane, self._pane = self._pane, None
        if pane is None:
            return
        try:
            pane.close()
        except Exception as exc:
            telemetry.record_event(
                "preview.close_failed",
                level="warning",
                data={"error": str(exc)},
                logger_name=self._logger_name,
            )


__all__ = ["PreviewRenderer"]
