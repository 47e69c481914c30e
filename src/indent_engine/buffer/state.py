"""Selection and edit-result value types exchanged with hosts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Selection:
    """Character offsets into a buffer.

    Selections are directionless: ``Selection(5, 2)`` covers the same text as
    ``Selection(2, 5)``. Commands always work on :meth:`normalized`.
    """

    start: int
    end: int

    @classmethod
    def caret(cls, offset: int) -> "Selection":
        return cls(offset, offset)

    @property
    def is_caret(self) -> bool:
        return self.start == self.end

    def normalized(self) -> "Selection":
        if self.start <= self.end:
            return self
        return Selection(self.end, self.start)

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)


@dataclass(frozen=True, slots=True)
class EditResult:
    """New buffer text paired with the selection that is valid against it.

    Hosts must apply both fields together.
    """

    buffer: str
    selection: Selection


__all__ = ["Selection", "EditResult"]
