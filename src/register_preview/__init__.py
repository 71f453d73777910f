"""Interactive register picker with a live, type-filtered preview pane."""

__all__ = [
    "adapters",
    "classification",
    "commands",
    "config",
    "errors",
    "keymaps",
    "preview",
    "runtime",
    "session",
    "store",
]

__version__ = "0.1.0"
