"""Facade that dispatches key events to the edit commands."""

from __future__ import annotations

from typing import Iterable, Optional

from indent_engine.buffer import (
    EditResult,
    Selection,
    clamp_selection,
    ensure_selection,
)
from indent_engine.config import EngineConfig
from indent_engine.events import KeyEvent, classify_key
from indent_engine.keymaps import KeymapRegistry, load_default_keymaps
from indent_engine.runtime import telemetry


class UnhandledKeyError(KeyError):
    """Raised when ``apply`` receives an event with no bound command."""

    def __init__(self, event: KeyEvent) -> None:
        super().__init__(f"No command bound to '{event.token}'")
        self.event = event


class EditEngine:
    """Stateless entry point: one call per keystroke, one ``EditResult`` back.

    The registry is configured at construction time and only read while
    dispatching, so a single engine can serve any number of buffers.
    """

    def __init__(
        self,
        *,
        config: EngineConfig | None = None,
        keymap_registry: KeymapRegistry | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.config = config or EngineConfig()
        self.logger = telemetry.get_logger(self.config.logger_name)
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="indent_engine.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)

    def apply(self, event: KeyEvent, buffer: str, selection: Selection) -> EditResult:
        checked = self._check_selection(buffer, selection)
        match = self.keymap_registry.resolve(event.token)
        if match is None:
            raise UnhandledKeyError(event)

        with telemetry.span(
            f"command::{event.token}",
            logger_name=self.config.logger_name,
            context={"action": match.action.id, "selection": checked.as_tuple()},
        ) as details:
            details["length"] = len(buffer)
            result = match.action(buffer, checked, event)
            if not isinstance(result, EditResult):
                raise TypeError(
                    f"Action '{match.action.id}' returned {type(result).__name__}"
                )
            details["result_selection"] = result.selection.as_tuple()
        return result

    def handle_key(
        self,
        key: str,
        buffer: str,
        selection: Selection,
        *,
        modifiers: Iterable[str] = (),
        text: Optional[str] = None,
    ) -> Optional[EditResult]:
        """Classify a raw key and apply it; ``None`` means the host keeps the key."""

        event = classify_key(key, modifiers=modifiers, text=text)
        if event is None:
            return None
        if self.keymap_registry.resolve(event.token) is None:
            return None
        return self.apply(event, buffer, selection)

    def _check_selection(self, buffer: str, selection: Selection) -> Selection:
        if self.config.selection_policy == "clamp":
            clamped = clamp_selection(buffer, selection)
            if clamped != selection.normalized():
                telemetry.record_event(
                    "selection.clamped",
                    level="warning",
                    data={"requested": selection.as_tuple(), "clamped": clamped.as_tuple()},
                    logger_name=self.config.logger_name,
                )
            return clamped
        return ensure_selection(buffer, selection)


__all__ = ["EditEngine", "UnhandledKeyError"]
