"""Adapter boundary types for syncing the engine with host text fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .state import EditResult, Selection


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot of the text field the engine edits."""

    text: str
    selection: Selection

    @classmethod
    def from_result(cls, result: EditResult) -> "BufferMirror":
        return cls(text=result.buffer, selection=result.selection)


class BufferSync(Protocol):
    """What a host text field must offer for the engine to drive it."""

    def pull_buffer(self) -> BufferMirror:
        """Return the current text and selection."""
        ...

    def push_edit(self, result: EditResult) -> None:
        """Replace the text and then re-apply ``result.selection``."""
        ...
