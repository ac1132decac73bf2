"""Declarative keymaps for the case menu and its host bindings."""

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult
from .defaults import (
    EDITOR_MODE,
    MENU_MODE,
    MENU_OPEN_KEY,
    load_default_keymaps,
)

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
    "load_default_keymaps",
    "EDITOR_MODE",
    "MENU_MODE",
    "MENU_OPEN_KEY",
]
