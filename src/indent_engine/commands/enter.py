"""Enter: newline that carries the current indentation forward."""

from __future__ import annotations

import re

from indent_engine.buffer import EditResult, Selection, locate
from indent_engine.events import KeyEvent
from indent_engine.transforms import INDENT_UNIT

from .core import splice

BLOCK_OPENERS: frozenset[str] = frozenset("{[:>")

_LEADING_WHITESPACE = re.compile(r"^\s+")


def indentation_for(line_text: str) -> str:
    """Indentation the line after ``line_text`` should start with."""

    match = _LEADING_WHITESPACE.match(line_text)
    indentation = match.group(0) if match else ""
    if line_text and line_text[-1] in BLOCK_OPENERS:
        indentation += INDENT_UNIT
    return indentation


def handle_enter(buffer: str, selection: Selection) -> EditResult:
    start, end = selection.normalized().as_tuple()
    line = locate(buffer, start)
    return splice(buffer, start, end, "\n" + indentation_for(line.line_text))


def enter_action(buffer: str, selection: Selection, event: KeyEvent) -> EditResult:
    del event
    return handle_enter(buffer, selection)


__all__ = ["BLOCK_OPENERS", "indentation_for", "handle_enter", "enter_action"]
