"""One-line descriptions of register values for the preview pane."""

from __future__ import annotations

from functools import singledispatch
from numbers import Number
from typing import Callable

from register_preview.store.values import (
    BufferRef,
    FileQuery,
    FileRef,
    FrameLayout,
    KeyMacro,
    Location,
    WindowLayout,
)

Describe = Callable[[object], str]


def truncate(text: str, width: int) -> str:
    flat = " ".join(text.split())
    if len(flat) <= width:
        return flat
    if width <= 3:
        return flat[:width]
    return flat[: width - 3] + "..."


@singledispatch
def describe_value(value: object) -> str:
    if isinstance(value, Number) and not isinstance(value, bool):
        return f"number {value}"
    return f"garbage: {value!r}"


@describe_value.register
def _(value: str) -> str:
    return value


@describe_value.register
def _(value: Location) -> str:
    return f"buffer position: buffer {value.buffer}, position {value.offset}"


@describe_value.register
def _(value: BufferRef) -> str:
    return f"buffer {value.name}"


@describe_value.register
def _(value: FileRef) -> str:
    return f"file {value.path}"


@describe_value.register
def _(value: FileQuery) -> str:
    return f"file-query reference to file {value.path}"


@describe_value.register
def _(value: WindowLayout) -> str:
    count = len(value.windows)
    return f"window configuration ({count} window{'s' if count != 1 else ''})"


@describe_value.register
def _(value: FrameLayout) -> str:
    count = len(value.frames)
    return f"frameset ({count} frame{'s' if count != 1 else ''})"


@describe_value.register
def _(value: KeyMacro) -> str:
    return f"keyboard macro: {' '.join(value.keys)}"


__all__ = ["Describe", "describe_value", "truncate"]
