"""Per-command selection policy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Iterable

from register_preview.classification import Tag, TypeTag
from register_preview.errors import DescriptorError


class ActionKind(str, Enum):
    INSERT = "insert"
    JUMP = "jump"
    VIEW = "view"
    MODIFY = "modify"
    SET = "set"

    @property
    def needs_entries(self) -> bool:
        """Whether the action can only run against an existing register."""

        return self in _READ_ACTIONS


_READ_ACTIONS = frozenset({ActionKind.INSERT, ActionKind.JUMP, ActionKind.VIEW})


@dataclass(frozen=True, slots=True)
class CommandDescriptor:
    """How a command filters, prompts, and confirms a register choice."""

    accepted_types: AbstractSet[Tag]
    prompt_message: str
    action: ActionKind = ActionKind.SET
    strict_match: bool = False

    def __post_init__(self) -> None:
        types = frozenset(self.accepted_types)
        if not types:
            raise DescriptorError("accepted_types cannot be empty")
        if self.prompt_message.count("%s") != 1:
            raise DescriptorError(
                f"prompt_message must contain exactly one '%s': {self.prompt_message!r}"
            )
        try:
            self.prompt_message % "x"
        except (TypeError, ValueError) as exc:
            raise DescriptorError(
                f"prompt_message is not a valid format string: {self.prompt_message!r}"
            ) from exc
        object.__setattr__(self, "accepted_types", types)
        object.__setattr__(self, "action", ActionKind(self.action))

    @property
    def accepts_all(self) -> bool:
        return TypeTag.ALL in self.accepted_types

    def format_prompt(self, key: str) -> str:
        return self.prompt_message % key

    @classmethod
    def build(
        cls,
        types: Iterable[Tag],
        prompt: str,
        action: ActionKind | str,
        *,
        strict: bool,
    ) -> "CommandDescriptor":
        return cls(
            accepted_types=frozenset(types),
            prompt_message=prompt,
            action=ActionKind(action),
            strict_match=strict,
        )


DEFAULT_DESCRIPTOR = CommandDescriptor(
    accepted_types=frozenset({TypeTag.ALL}),
    prompt_message="Overwrite entry '%s'",
    action=ActionKind.SET,
    strict_match=False,
)


__all__ = ["ActionKind", "CommandDescriptor", "DEFAULT_DESCRIPTOR"]
