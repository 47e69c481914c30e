"""Keystroke commands that turn a buffer and selection into an edit."""

from .close_brace import close_brace_action, handle_close_brace
from .core import splice
from .enter import BLOCK_OPENERS, enter_action, handle_enter, indentation_for
from .tab import handle_tab, tab_action

__all__ = [
    "splice",
    "handle_tab",
    "handle_enter",
    "handle_close_brace",
    "indentation_for",
    "BLOCK_OPENERS",
    "tab_action",
    "enter_action",
    "close_brace_action",
]
