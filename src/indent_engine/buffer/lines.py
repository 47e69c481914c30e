"""Line lookup derived from raw buffer offsets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineInfo:
    line_start: int
    line_text: str

    @property
    def line_end(self) -> int:
        return self.line_start + len(self.line_text)


def line_start_for(buffer: str, offset: int) -> int:
    """Index right after the last newline before ``offset`` (or 0)."""

    return buffer.rfind("\n", 0, offset) + 1


def locate(buffer: str, offset: int) -> LineInfo:
    """Return the start offset and text of the line containing ``offset``.

    Boundaries are recomputed from the buffer on every call.
    """

    start = line_start_for(buffer, offset)
    newline = buffer.find("\n", start)
    if newline == -1:
        return LineInfo(line_start=start, line_text=buffer[start:])
    return LineInfo(line_start=start, line_text=buffer[start:newline])


__all__ = ["LineInfo", "line_start_for", "locate"]
