"""Keymap registry and default bindings."""

from .models import ActionRef, Binding, ResolutionMatch
from .registry import KeymapConflictError, KeymapRegistry
from .defaults import load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "ResolutionMatch",
    "KeymapRegistry",
    "KeymapConflictError",
    "load_default_keymaps",
]
