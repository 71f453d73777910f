"""Registry mapping command identities to their descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from register_preview.runtime.telemetry import span

from .descriptors import DEFAULT_DESCRIPTOR, CommandDescriptor


@dataclass(slots=True)
class DescriptorStats:
    command_count: int
    strict_count: int
    revision: int


class DescriptorRegistry:
    """Open map of command id -> descriptor; unknown ids get ``default``."""

    def __init__(
        self,
        *,
        default: CommandDescriptor = DEFAULT_DESCRIPTOR,
        logger_name: str | None = None,
    ) -> None:
        self._descriptors: Dict[str, CommandDescriptor] = {}
        self._default = default
        self._logger_name = logger_name
        self._revision = 0

    @property
    def default(self) -> CommandDescriptor:
        return self._default

    def revision(self) -> int:
        return self._revision

    def register(self, command_id: str, descriptor: CommandDescriptor) -> CommandDescriptor:
        if not command_id:
            raise ValueError("command_id cannot be empty")
        with span(
            "commands::register",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command_id, "action": descriptor.action.value},
        ) as handle:
            if command_id in self._descriptors:
                handle.add_metadata("replaced", True)
            self._descriptors[command_id] = descriptor
            self._revision += 1
            return descriptor

    def lookup(self, command_id: Optional[str]) -> CommandDescriptor:
        if command_id is None:
            return self._default
        return self._descriptors.get(command_id, self._default)

    def __contains__(self, command_id: object) -> bool:
        return command_id in self._descriptors

    def stats(self) -> DescriptorStats:
        return DescriptorStats(
            command_count=len(self._descriptors),
            strict_count=sum(1 for d in self._descriptors.values() if d.strict_match),
            revision=self._revision,
        )


__all__ = ["DescriptorRegistry", "DescriptorStats"]
