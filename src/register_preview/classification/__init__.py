"""Type classification of register values and type-based filtering."""

from .classifier import (
    DEFAULT_CLASSIFIER,
    Tag,
    TypeClassifier,
    TypeRule,
    TypeTag,
    classify,
    default_classifier,
    register_type,
)
from .filtering import accepts_all, filter_entries, filter_keys

__all__ = [
    "DEFAULT_CLASSIFIER",
    "Tag",
    "TypeClassifier",
    "TypeRule",
    "TypeTag",
    "classify",
    "default_classifier",
    "register_type",
    "accepts_all",
    "filter_entries",
    "filter_keys",
]
