"""Bridge that drives a host text field through the edit engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from indent_engine.buffer import BufferMirror, BufferSync, EditResult, Selection
from indent_engine.engine import EditEngine


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextAreaHooks:
    """Optional callbacks the bridge invokes around each handled key."""

    on_edit: Callable[[EditResult], None] = _noop
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextAreaBridge:
    """Reads the host field, runs the engine, and writes the result back.

    The host is expected to suppress its own handling of a key whenever
    :meth:`handle_key` returns ``True``.
    """

    def __init__(
        self,
        engine: EditEngine,
        sync: BufferSync,
        hooks: TextAreaHooks | None = None,
    ) -> None:
        self.engine = engine
        self.sync = sync
        self.hooks = hooks or TextAreaHooks()

    def handle_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> bool:
        mirror = self.sync.pull_buffer()
        self._log_state("key ->", key=key, text=text, selection=mirror.selection.as_tuple())
        result = self.engine.handle_key(
            key,
            mirror.text,
            mirror.selection,
            modifiers=tuple(modifiers),
            text=text,
        )
        if result is None:
            self._log_state("passthrough <-", key=key)
            return False

        self.sync.push_edit(result)
        self.hooks.on_edit(result)
        start, end = result.selection.as_tuple()
        self.hooks.update_status(f"{key}: {start}-{end}")
        self._log_state("result <-", selection=(start, end), length=len(result.buffer))
        return True

    def _log_state(self, prefix: str, **fields: object) -> None:
        parts = [prefix]
        for key, value in fields.items():
            if value is not None:
                parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))


class StringBufferSync:
    """In-memory ``BufferSync`` used by tests and headless hosts."""

    def __init__(self, text: str = "", selection: Selection | None = None) -> None:
        self._mirror = BufferMirror(
            text=text, selection=selection or Selection.caret(len(text))
        )

    def pull_buffer(self) -> BufferMirror:
        return self._mirror

    def push_edit(self, result: EditResult) -> None:
        self._mirror = BufferMirror.from_result(result)


__all__ = ["TextAreaBridge", "TextAreaHooks", "StringBufferSync"]
