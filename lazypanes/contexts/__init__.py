"""Contexts: named UI modes that occupy panels, and the registry tracking focus."""

from .keys import LIST_CONTEXTS, ContextKey
from .registry import (
    Context,
    ContextRegistry,
    ContextTree,
    FocusState,
    ListProvider,
    StaticListProvider,
)

__all__ = [
    "ContextKey",
    "LIST_CONTEXTS",
    "Context",
    "ContextRegistry",
    "ContextTree",
    "FocusState",
    "ListProvider",
    "StaticListProvider",
]
