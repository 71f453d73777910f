"""Descriptors for the stock register commands."""

from __future__ import annotations

from typing import Mapping

from register_preview.classification import TypeTag

from .descriptors import ActionKind, CommandDescriptor
from .registry import DescriptorRegistry

_JUMP_TYPES = frozenset(
    {
        TypeTag.LOCATION,
        TypeTag.BUFFER_REF,
        TypeTag.FILE_PATH,
        TypeTag.FILE_QUERY,
        TypeTag.WINDOW_LAYOUT,
        TypeTag.FRAME_LAYOUT,
        TypeTag.KEY_MACRO,
    }
)
_TEXT = frozenset({TypeTag.TEXT})
_TEXT_OR_NUMBER = frozenset({TypeTag.TEXT, TypeTag.NUMBER})
_ALL = frozenset({TypeTag.ALL})


def _set(prompt: str) -> CommandDescriptor:
    return CommandDescriptor.build(_ALL, prompt, ActionKind.SET, strict=False)


DEFAULT_DESCRIPTORS: Mapping[str, CommandDescriptor] = {
    "insert-register": CommandDescriptor.build(
        _TEXT_OR_NUMBER, "Insert register `%s'", ActionKind.INSERT, strict=True
    ),
    "jump-to-register": CommandDescriptor.build(
        _JUMP_TYPES, "Jump to register `%s'", ActionKind.JUMP, strict=True
    ),
    "view-register": CommandDescriptor.build(
        _ALL, "View register `%s'", ActionKind.VIEW, strict=True
    ),
    "append-to-register": CommandDescriptor.build(
        _TEXT, "Append to register `%s'", ActionKind.MODIFY, strict=True
    ),
    "prepend-to-register": CommandDescriptor.build(
        _TEXT, "Prepend to register `%s'", ActionKind.MODIFY, strict=True
    ),
    "increment-register": CommandDescriptor.build(
        _TEXT_OR_NUMBER, "Increment register `%s'", ActionKind.MODIFY, strict=True
    ),
    "copy-to-register": _set("Copy to register `%s'"),
    "point-to-register": _set("Point to register `%s'"),
    "number-to-register": _set("Number to register `%s'"),
    "window-configuration-to-register": _set("Window configuration to register `%s'"),
    "frame-configuration-to-register": _set("Frame configuration to register `%s'"),
    "copy-rectangle-to-register": _set("Rectangle to register `%s'"),
    "file-to-register": _set("File to register `%s'"),
    "buffer-to-register": _set("Buffer to register `%s'"),
}


def load_default_descriptors(registry: DescriptorRegistry) -> None:
    for command_id, descriptor in DEFAULT_DESCRIPTORS.items():
        registry.register(command_id, descriptor)


__all__ = ["DEFAULT_DESCRIPTORS", "load_default_descriptors"]
