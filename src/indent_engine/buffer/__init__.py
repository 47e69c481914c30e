"""Buffer value types, line lookup, and host sync boundary."""

from .lines import LineInfo, line_start_for, locate
from .state import EditResult, Selection
from .sync import BufferMirror, BufferSync
from .validation import InvalidSelection, clamp_selection, ensure_selection

__all__ = [
    "EditResult",
    "Selection",
    "LineInfo",
    "locate",
    "line_start_for",
    "BufferMirror",
    "BufferSync",
    "InvalidSelection",
    "ensure_selection",
    "clamp_selection",
]
