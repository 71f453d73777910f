"""Command descriptors and the registry resolving them."""

from .descriptors import DEFAULT_DESCRIPTOR, ActionKind, CommandDescriptor
from .registry import DescriptorRegistry, DescriptorStats
from .defaults import DEFAULT_DESCRIPTORS, load_default_descriptors

__all__ = [
    "ActionKind",
    "CommandDescriptor",
    "DEFAULT_DESCRIPTOR",
    "DescriptorRegistry",
    "DescriptorStats",
    "DEFAULT_DESCRIPTORS",
    "load_default_descriptors",
]
