from __future__ import annotations

import pytest

from indent_engine import (
    CloseBrace,
    EditEngine,
    EditResult,
    Enter,
    InvalidSelection,
    Selection,
    Tab,
    UnhandledKeyError,
)
from indent_engine.commands import tab_action
from indent_engine.config import EngineConfig
from indent_engine.keymaps import ActionRef, Binding, KeymapRegistry


def make_engine(**kwargs: object) -> EditEngine:
    return EditEngine(**kwargs)  # type: ignore[arg-type]


def test_apply_tab_inserts_indent() -> None:
    engine = make_engine()

    result = engine.apply(Tab(shift=False), "ab", Selection(1, 1))

    assert result == EditResult("a  b", Selection(3, 3))


def test_apply_shift_tab_dedents() -> None:
    engine = make_engine()

    result = engine.apply(Tab(shift=True), "  ", Selection(2, 2))

    assert result == EditResult("", Selection(0, 0))


def test_apply_enter_and_close_brace_round_trip_a_block() -> None:
    engine = make_engine()
    buffer = "if (x) {"

    opened = engine.apply(Enter(), buffer, Selection.caret(len(buffer)))
    assert opened.buffer == "if (x) {\n  "

    closed = engine.apply(CloseBrace(), opened.buffer, opened.selection)
    assert closed.buffer == "if (x) {\n}"
    assert closed.selection == Selection(10, 10)


def test_apply_rejects_out_of_range_selection_by_default() -> None:
    engine = make_engine()

    with pytest.raises(InvalidSelection):
        engine.apply(Tab(), "ab", Selection(0, 5))


def test_clamp_policy_pulls_offsets_into_range() -> None:
    engine = make_engine(config=EngineConfig(selection_policy="clamp"))

    result = engine.apply(Tab(), "ab", Selection(5, 9))

    assert result == EditResult("ab  ", Selection(4, 4))


def test_apply_without_binding_raises() -> None:
    engine = make_engine(keymap_registry=KeymapRegistry())

    with pytest.raises(UnhandledKeyError) as info:
        engine.apply(Enter(), "", Selection(0, 0))

    assert info.value.event == Enter()


def test_handle_key_passes_through_unrelated_keys() -> None:
    engine = make_engine()

    assert engine.handle_key("a", "ab", Selection(1, 1)) is None
    assert engine.handle_key("]", "ab", Selection(1, 1), text="]") is None


def test_handle_key_classifies_host_key_names() -> None:
    engine = make_engine()

    indented = engine.handle_key("tab", "ab", Selection(1, 1))
    dedented = engine.handle_key("tab", "  ", Selection(2, 2), modifiers=("shift",))
    braced = engine.handle_key("right_curly_bracket", "    ", Selection(4, 4), text="}")

    assert indented == EditResult("a  b", Selection(3, 3))
    assert dedented == EditResult("", Selection(0, 0))
    assert braced == EditResult("  }", Selection(3, 3))


def test_custom_registry_only_handles_its_tokens() -> None:
    registry = KeymapRegistry()
    registry.register_action(ActionRef(id="edit.tab", handler=tab_action))
    registry.register_binding(Binding(id="tab.indent", token="tab", action_id="edit.tab"))
    engine = make_engine(keymap_registry=registry)

    assert engine.handle_key("tab", "ab", Selection(0, 0)) == EditResult("  ab", Selection(2, 2))
    assert engine.handle_key("tab", "  ab", Selection(2, 2), modifiers=("shift",)) is None
    with pytest.raises(UnhandledKeyError):
        engine.apply(Tab(shift=True), "  ab", Selection(2, 2))


def test_action_must_return_edit_result() -> None:
    registry = KeymapRegistry()
    registry.register_action(ActionRef(id="edit.broken", handler=lambda *args: None))
    registry.register_binding(Binding(id="enter.broken", token="enter", action_id="edit.broken"))
    engine = make_engine(keymap_registry=registry)

    with pytest.raises(TypeError):
        engine.apply(Enter(), "", Selection(0, 0))


def test_apply_leaves_inputs_untouched() -> None:
    engine = make_engine()
    buffer = "a\nb"
    selection = Selection(0, 3)

    engine.apply(Tab(), buffer, selection)

    assert buffer == "a\nb"
    assert selection == Selection(0, 3)
