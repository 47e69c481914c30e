"""Built-in bindings wiring the key events to the edit commands."""

from __future__ import annotations

from typing import Iterable, Sequence

from indent_engine.commands import close_brace_action, enter_action, tab_action

from .models import ActionRef, Binding
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="edit.tab",
        handler=tab_action,
        description="Indent the caret or selected lines",
    ),
    ActionRef(
        id="edit.enter",
        handler=enter_action,
        description="Insert a newline keeping the current indentation",
    ),
    ActionRef(
        id="edit.close_brace",
        handler=close_brace_action,
        description="Insert '}' and snap a blank indented line back one level",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(
        id="tab.indent",
        token="tab",
        action_id="edit.tab",
        description="Indent",
    ),
    Binding(
        id="tab.dedent",
        token="shift+tab",
        action_id="edit.tab",
        description="Dedent",
    ),
    Binding(
        id="enter.auto_indent",
        token="enter",
        action_id="edit.enter",
        description="Newline with auto-indent",
    ),
    Binding(
        id="brace.close",
        token="}",
        action_id="edit.close_brace",
        description="Close brace with auto-dedent",
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in actions and bindings."""

    excluded = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
