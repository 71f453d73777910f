"""Textual integration for picker sessions."""

from .controller import HookInputLine, HookPane, PickerUIHooks, TextualPickerAdapter

__all__ = ["HookInputLine", "HookPane", "PickerUIHooks", "TextualPickerAdapter"]
