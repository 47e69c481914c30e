"""Tab and Shift+Tab: indent or dedent the caret position or selected lines."""

from __future__ import annotations

from indent_engine.buffer import EditResult, Selection, locate
from indent_engine.events import KeyEvent, Tab
from indent_engine.transforms import INDENT_UNIT, dedent_text, indent_text

from .core import splice


def handle_tab(buffer: str, selection: Selection, *, shift: bool = False) -> EditResult:
    start, end = selection.normalized().as_tuple()
    line = locate(buffer, start)
    line_start = line.line_start

    if start == end:
        if shift:
            # Only the text before the caret is dedented.
            return splice(buffer, line_start, end, dedent_text(buffer[line_start:end]))
        return splice(buffer, start, end, INDENT_UNIT)

    block = buffer[line_start:end]
    if shift:
        new_text = dedent_text(block)
        anchor = start - 2 if line.line_text.startswith(INDENT_UNIT) else start
    else:
        new_text = indent_text(block)
        anchor = start + 2
    return splice(
        buffer,
        line_start,
        end,
        new_text,
        selection=Selection(anchor, anchor + len(new_text)),
    )


def tab_action(buffer: str, selection: Selection, event: KeyEvent) -> EditResult:
    shift = isinstance(event, Tab) and event.shift
    return handle_tab(buffer, selection, shift=shift)


__all__ = ["handle_tab", "tab_action"]
