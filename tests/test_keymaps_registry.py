import pytest

from indent_engine.keymaps import (
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)


def make_action(action_id: str = "edit.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    token: str = "tab",
    action_id: str = "edit.test",
) -> Binding:
    return Binding(id=binding_id, token=token, action_id=action_id)


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="tab.indent")

    registry.register_binding(binding)

    assert list(registry.iter_bindings()) == [binding]
    assert registry.tokens() == ("tab",)


def test_binding_tokens_are_normalized() -> None:
    binding = make_binding(binding_id="b", token=" Shift+Tab ")

    assert binding.token == "shift+tab"


def test_blank_binding_token_rejected() -> None:
    with pytest.raises(ValueError):
        make_binding(binding_id="b", token="  ")


def test_action_handler_must_be_callable() -> None:
    with pytest.raises(TypeError):
        ActionRef(id="edit.bad", handler="tab")  # type: ignore[arg-type]


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="tab.indent"))

    with pytest.raises(KeymapConflictError) as info:
        registry.register_binding(make_binding(binding_id="tab.duplicate"))

    assert info.value.existing.id == "tab.indent"
    assert info.value.binding.id == "tab.duplicate"
    assert registry.resolve("tab").binding.id == "tab.indent"


def test_register_binding_duplicate_id_fails_without_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="binding"))

    with pytest.raises(ValueError):
        registry.register_binding(make_binding(binding_id="binding", token="enter"))


def test_register_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="orphan"))


def test_register_action_twice_fails_without_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())

    replacement = make_action()
    registry.register_action(replacement, replace=True)
    assert registry.get_action("edit.test") is replacement


def test_register_binding_with_replace_moves_token() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    first = make_binding(binding_id="binding")
    second = make_binding(binding_id="binding", token="enter")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]
    assert registry.tokens() == ("enter",)
    assert registry.resolve("tab") is None


def test_register_binding_with_replace_takes_over_token() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="old"))

    registry.register_binding(make_binding(binding_id="new"), replace=True)

    assert [b.id for b in registry.iter_bindings()] == ["new"]
    with pytest.raises(KeyError):
        registry.get_binding("old")


def test_resolve_pairs_binding_with_action() -> None:
    registry = KeymapRegistry()
    action = make_action()
    registry.register_action(action)
    registry.register_binding(make_binding(binding_id="tab.indent"))

    match = registry.resolve(" TAB ")

    assert match is not None
    assert match.binding.id == "tab.indent"
    assert match.action is action
    assert registry.resolve("enter") is None


def test_load_default_keymaps_binds_every_command() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    assert registry.tokens() == ("enter", "shift+tab", "tab", "}")
    assert registry.get_binding("tab.dedent").action_id == "edit.tab"
    assert registry.get_action("edit.close_brace").description


def test_load_default_keymaps_twice_conflicts() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)

    with pytest.raises(ValueError):
        load_default_keymaps(registry)

    load_default_keymaps(registry, replace=True)
    assert len(list(registry.iter_bindings())) == 4


def test_load_default_keymaps_exclude_and_extra() -> None:
    registry = KeymapRegistry()
    extra = Binding(id="tab.ctrl_indent", token="ctrl+]", action_id="edit.tab")

    load_default_keymaps(
        registry,
        exclude_bindings=("brace.close",),
        extra_bindings=(extra,),
    )

    assert registry.resolve("}") is None
    resolved = registry.resolve("ctrl+]")
    assert resolved is not None
    assert resolved.binding == extra
