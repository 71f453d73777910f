"""Highlight-cursor movement across preview lines."""

from __future__ import annotations

from typing import Callable, Optional, TYPE_CHECKING

from .renderer import PreviewRenderer

if TYPE_CHECKING:  # pragma: no cover
    from register_preview.session.input_line import InputLine


class NavigationController:
    """Moves the highlight and writes the selected key into the input line.

    Inert while ``replaying()`` is true or when no full pane is visible.
    """

    def __init__(
        self,
        renderer: PreviewRenderer,
        input_line: "InputLine",
        *,
        replaying: Callable[[], bool] = lambda: False,
    ) -> None:
        self._renderer = renderer
        self._input_line = input_line
        self._replaying = replaying

    @property
    def active(self) -> bool:
        return not self._replaying() and self._renderer.navigable

    def move_next(self) -> Optional[str]:
        return self._move(1)

    def move_previous(self) -> Optional[str]:
        return self._move(-1)

    def _move(self, step: int) -> Optional[str]:
        if not self.active:
            return None
        count = self._renderer.line_count()
        if count == 0:
            return None
        current = self._renderer.highlighted()
        if current is None:
            target = 0 if step > 0 else count - 1
        else:
            target = (current + step) % count
        self._renderer.highlight(target)
        key = self._renderer.key_at(target)
        self._input_line.set_contents(key)
        return key


__all__ = ["NavigationController"]
