"""Splice primitive shared by every command."""

from __future__ import annotations

from indent_engine.buffer import EditResult, Selection


def splice(
    buffer: str,
    start: int,
    end: int,
    replacement: str,
    *,
    selection: Selection | None = None,
) -> EditResult:
    """Replace ``buffer[start:end]`` and compute the resulting selection.

    Without an explicit ``selection`` the caret lands after the replacement,
    as a text field does after inserting text. A requested selection has
    each bound pulled into ``[0, len]``; a start left past the end collapses
    onto the end. A negative start therefore becomes ``0`` and the selection
    keeps covering the first line.
    """

    new_buffer = buffer[:start] + replacement + buffer[end:]
    if selection is None:
        caret = start + len(replacement)
        return EditResult(new_buffer, Selection.caret(caret))
    return EditResult(new_buffer, clamp_to_field(len(new_buffer), selection))


def clamp_to_field(length: int, selection: Selection) -> Selection:
    end = max(0, min(selection.end, length))
    start = max(0, min(selection.start, length))
    if start > end:
        start = end
    return Selection(start, end)


__all__ = ["splice", "clamp_to_field"]
