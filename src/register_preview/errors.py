"""Exceptions and transient notices raised by picker sessions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional


class RegisterPreviewError(RuntimeError):
    """Base class for every error a picker session surfaces to its caller."""


class SelectionValidationError(RegisterPreviewError):
    """Raised when a session cannot produce a valid register key."""

    def __init__(
        self,
        message: str,
        *,
        reason: str,
        action: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.action = action

    @classmethod
    def no_suitable_entry(cls, action: str) -> "SelectionValidationError":
        return cls(
            f"no entry suitable for `{action}`",
            reason="no_suitable_entry",
            action=action,
        )

    @classmethod
    def empty_submit(cls) -> "SelectionValidationError":
        return cls("no entry specified", reason="empty_submit")


class SelectionAborted(RegisterPreviewError):
    """Raised when the user quits a session without committing a key."""

    def __init__(self, message: str = "Quit") -> None:
        super().__init__(message)


class DescriptorError(ValueError):
    """Raised for malformed command descriptors."""


NoticeKind = Literal["not_matching", "empty_entry", "prompt"]


@dataclass(frozen=True, slots=True)
class Notice:
    """Recoverable, transient message shown on the input line."""

    kind: NoticeKind
    text: str

    @classmethod
    def not_matching(cls) -> "Notice":
        return cls("not_matching", "Not matching")

    @classmethod
    def empty_entry(cls, key: str) -> "Notice":
        return cls("empty_entry", f"entry `{key}` is empty")

    @classmethod
    def prompt(cls, template: str, key: str) -> "Notice":
        return cls("prompt", template % key)


__all__ = [
    "RegisterPreviewError",
    "SelectionValidationError",
    "SelectionAborted",
    "DescriptorError",
    "Notice",
    "NoticeKind",
]
