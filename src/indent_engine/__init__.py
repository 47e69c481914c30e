"""Structural keystroke commands for plain-text code editors."""

from .buffer import EditResult, InvalidSelection, Selection
from .engine import EditEngine, UnhandledKeyError
from .events import CloseBrace, Enter, KeyEvent, Tab, classify_key

__all__ = [
    "EditEngine",
    "EditResult",
    "Selection",
    "InvalidSelection",
    "UnhandledKeyError",
    "KeyEvent",
    "Tab",
    "Enter",
    "CloseBrace",
    "classify_key",
]

__version__ = "0.1.0"
