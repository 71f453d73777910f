"""Transient per-session state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

from register_preview.errors import RegisterPreviewError

ExitKind = Literal["confirmed", "aborted", "error"]


@dataclass(frozen=True, slots=True)
class SessionExit:
    kind: ExitKind
    key: Optional[str] = None
    error: Optional[RegisterPreviewError] = None

    @classmethod
    def confirmed(cls, key: str) -> "SessionExit":
        return cls("confirmed", key=key)

    @classmethod
    def aborted(cls, error: Optional[RegisterPreviewError] = None) -> "SessionExit":
        return cls("aborted", error=error)

    @classmethod
    def failed(cls, error: RegisterPreviewError) -> "SessionExit":
        return cls("error", error=error)


@dataclass(slots=True)
class SessionState:
    filtered_keys: tuple[str, ...] = ()
    pattern: str = ""
    highlight_index: Optional[int] = None
    preview_open: bool = False
    exit: Optional[SessionExit] = None
    default_key: Optional[str] = None
    confirm_pending: bool = False
    notices: list[str] = field(default_factory=list)

    @property
    def done(self) -> bool:
        return self.exit is not None

    @property
    def logical(self) -> str:
        """``empty``, ``prefix``, ``confirmed`` or ``aborted``."""

        if self.exit is not None:
            return "confirmed" if self.exit.kind == "confirmed" else "aborted"
        return "prefix" if self.pattern else "empty"


__all__ = ["ExitKind", "SessionExit", "SessionState"]
