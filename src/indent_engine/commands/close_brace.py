"""Closing brace: snap a whitespace-only line back one indent level."""

from __future__ import annotations

import re

from indent_engine.buffer import EditResult, Selection, locate
from indent_engine.events import KeyEvent

from .core import splice

_BLANK_INDENTED_LINE = re.compile(r"^\s{2,}$")


def handle_close_brace(buffer: str, selection: Selection) -> EditResult:
    start, end = selection.normalized().as_tuple()
    line = locate(buffer, start)

    if start == end and _BLANK_INDENTED_LINE.match(line.line_text):
        # Always one level, never further back than the line start.
        start = max(line.line_start, start - 2)

    return splice(buffer, start, end, "}")


def close_brace_action(
    buffer: str, selection: Selection, event: KeyEvent
) -> EditResult:
    del event
    return handle_close_brace(buffer, selection)


__all__ = ["handle_close_brace", "close_brace_action"]
