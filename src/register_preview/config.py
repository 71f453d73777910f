"""Picker configuration: preview mode, default keys, pane placement."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from dataclasses import replace as _replace
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from register_preview.runtime import telemetry


class PreviewMode(str, Enum):
    """How eagerly the preview pane is shown."""

    ALWAYS = "always"
    CONFIRM_ON_REPEAT = "confirm_on_repeat"
    QUICK_ONLY = "quick_only"
    NEVER = "never"

    @property
    def opens_full_pane(self) -> bool:
        return self in {PreviewMode.ALWAYS, PreviewMode.CONFIRM_ON_REPEAT}


DEFAULT_KEYS: tuple[str, ...] = tuple(string.ascii_lowercase)


def _normalize_keys(keys: Iterable[str]) -> tuple[str, ...]:
    values = tuple(str(key) for key in keys)
    for key in values:
        if len(key) != 1:
            raise ValueError(f"default key {key!r} must be a single character")
    return tuple(dict.fromkeys(values))


@dataclass(frozen=True, slots=True)
class PreviewSettings:
    """Immutable picker settings shared by every session."""

    mode: PreviewMode = PreviewMode.ALWAYS
    default_keys: tuple[str, ...] = DEFAULT_KEYS
    placement: Mapping[str, object] = field(default_factory=dict)
    separator: str = ": "
    max_description: int = 60

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", PreviewMode(self.mode))
        object.__setattr__(self, "default_keys", _normalize_keys(self.default_keys))
        object.__setattr__(self, "placement", MappingProxyType(dict(self.placement)))
        if self.max_description < 1:
            raise ValueError("max_description must be positive")

    def replace(self, **changes: object) -> "PreviewSettings":
        return _replace(self, **changes)  # type: ignore[arg-type]

    @classmethod
    def from_env(cls) -> "PreviewSettings":
        """Build settings from ``REGISTER_PREVIEW_*`` variables, ignoring bad values."""

        log = telemetry.get_logger("register_preview.config")
        kwargs: dict[str, object] = {}

        mode = telemetry.env("MODE")
        if mode:
            try:
                kwargs["mode"] = PreviewMode(mode.strip().lower())
            except ValueError:
                log.warning(f"ignoring unknown preview mode {mode!r}")

        keys = telemetry.env("DEFAULT_KEYS")
        if keys:
            candidates = [key for key in keys if not key.isspace()]
            if candidates:
                kwargs["default_keys"] = tuple(candidates)

        width = telemetry.env("MAX_DESCRIPTION")
        if width:
            try:
                value = int(width)
            except ValueError:
                value = 0
            if value > 0:
                kwargs["max_description"] = value
            else:
                log.warning(f"ignoring invalid description width {width!r}")

        return cls(**kwargs)  # type: ignore[arg-type]


__all__ = ["PreviewMode", "PreviewSettings", "DEFAULT_KEYS"]
