"""Key events the engine reacts to and classification of raw host keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class Tab:
    shift: bool = False

    @property
    def token(self) -> str:
        return "shift+tab" if self.shift else "tab"


@dataclass(frozen=True, slots=True)
class Enter:
    @property
    def token(self) -> str:
        return "enter"


@dataclass(frozen=True, slots=True)
class CloseBrace:
    @property
    def token(self) -> str:
        return "}"


KeyEvent = Union[Tab, Enter, CloseBrace]

_TAB_NAMES = frozenset({"tab", "<tab>", "backtab"})
_ENTER_NAMES = frozenset({"enter", "return", "<cr>", "<enter>"})
_BRACE_NAMES = frozenset({"}", "right_curly_bracket", "braceright"})


def classify_key(
    key: str, *, modifiers: Iterable[str] = (), text: Optional[str] = None
) -> Optional[KeyEvent]:
    """Map a host key name onto a ``KeyEvent``.

    Returns ``None`` for every key the engine leaves to the host. ``backtab``
    and a ``shift+`` prefix both count as Shift+Tab. Shift+Enter is a plain
    Enter; Enter with any other modifier is left to the host.
    """

    name = key.strip().lower()
    mods = set(_normalize_modifiers(modifiers))
    if name.startswith("shift+"):
        mods.add("shift")
        name = name[len("shift+"):]

    if name in _TAB_NAMES:
        return Tab(shift="shift" in mods or "backtab" in name)
    if name in _ENTER_NAMES and mods <= {"shift"}:
        return Enter()
    if name in _BRACE_NAMES or text == "}":
        return CloseBrace()
    return None


__all__ = ["Tab", "Enter", "CloseBrace", "KeyEvent", "classify_key"]
