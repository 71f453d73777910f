"""Preview pane rendering, value descriptions, and highlight navigation."""

from .describe import Describe, describe_value, truncate
from .navigation import NavigationController
from .pane import MemoryPane, MemoryPaneFactory, Pane, PaneFactory, PreviewLine
from .renderer import PreviewRenderer

__all__ = [
    "Describe",
    "describe_value",
    "truncate",
    "NavigationController",
    "MemoryPane",
    "MemoryPaneFactory",
    "Pane",
    "PaneFactory",
    "PreviewLine",
    "PreviewRenderer",
]
