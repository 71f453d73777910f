"""Picker sessions: input engine, keymap actions, and orchestration."""

from .engine import InputEngine
from .input_line import InputLine, MemoryInputLine
from .keymap import PICKER_MODE, default_resolver, load_picker_keymap
from .orchestrator import RegisterReader, SelectionSession
from .state import SessionExit, SessionState

__all__ = [
    "InputEngine",
    "InputLine",
    "MemoryInputLine",
    "PICKER_MODE",
    "default_resolver",
    "load_picker_keymap",
    "RegisterReader",
    "SelectionSession",
    "SessionExit",
    "SessionState",
]
