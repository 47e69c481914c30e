"""Validation helpers shared by every command."""

from __future__ import annotations

from .state import Selection


class InvalidSelection(RuntimeError):
    """Raised when a host provides offsets that fall outside the buffer."""

    def __init__(self, message: str, *, selection: Selection, length: int) -> None:
        super().__init__(message)
        self.selection = selection
        self.length = length


def ensure_selection(buffer: str, selection: Selection) -> Selection:
    """Return the normalised selection or raise ``InvalidSelection``."""

    length = len(buffer)
    for offset in (selection.start, selection.end):
        if offset < 0 or offset > length:
            raise InvalidSelection(
                f"Offset {offset} out of range for buffer of length {length}",
                selection=selection,
                length=length,
            )
    return selection.normalized()


def clamp_selection(buffer: str, selection: Selection) -> Selection:
    """Bound both offsets to ``[0, len(buffer)]`` and normalise."""

    length = len(buffer)
    start = max(0, min(selection.start, length))
    end = max(0, min(selection.end, length))
    return Selection(start, end).normalized()
