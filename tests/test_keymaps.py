import pytest

from register_preview.keymaps import (
    ActionRef,
    Binding,
    KeyInput,
    KeymapConflictError,
    KeymapRegistry,
    KeymapResolver,
    WhenClause,
    key_token,
)
from register_preview.session import PICKER_MODE, default_resolver


def make_action(action_id: str = "picker.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    binding_id: str,
    *,
    key: str = "ctrl+n",
    action_id: str = "picker.test",
    when: tuple[WhenClause, ...] = (),
    priority: int = 0,
) -> Binding:
    return Binding(
        id=binding_id,
        mode="picker",
        key=key,
        action_id=action_id,
        when=when,
        priority=priority,
    )


def build_registry(bindings: list[Binding]) -> KeymapRegistry:
    registry = KeymapRegistry()
    for action_id in {binding.action_id for binding in bindings}:
        registry.register_action(make_action(action_id))
    for binding in bindings:
        registry.register_binding(binding)
    return registry


def test_key_tokens_normalize_modifiers() -> None:
    assert key_token("n", ("CTRL",)) == "ctrl+n"
    assert key_token("n", ("shift", "ctrl", "ctrl")) == "ctrl+shift+n"
    assert KeyInput("n", modifiers=("Ctrl",)).token == "ctrl+n"
    assert KeyInput.char("a").token == "a"


def test_conflicting_binding_rejected() -> None:
    registry = build_registry([make_binding("first")])

    with pytest.raises(KeymapConflictError):
        registry.register_binding(make_binding("second"))


def test_binding_with_different_when_is_not_a_conflict() -> None:
    registry = build_registry(
        [
            make_binding("visible", when=(WhenClause("preview_visible"),)),
            make_binding("hidden", when=(WhenClause.parse("!preview_visible"),)),
        ]
    )

    assert len(list(registry.iter_bindings("picker"))) == 2


def test_binding_requires_known_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding("orphan"))


def test_resolver_respects_when_clauses() -> None:
    binding = make_binding("nav", when=(WhenClause("preview_visible"),))
    resolver = KeymapResolver(build_registry([binding]))

    hidden = resolver.resolve("picker", "ctrl+n", context={"preview_visible": False})
    visible = resolver.resolve("picker", "ctrl+n", context={"preview_visible": True})

    assert hidden.status == "miss"
    assert visible.status == "match"
    assert visible.match is not None and visible.match.binding.id == "nav"


def test_resolver_prefers_priority() -> None:
    low = make_binding("low", when=(WhenClause("a"),))
    high = make_binding("high", when=(WhenClause("b"),), priority=5)
    resolver = KeymapResolver(build_registry([low, high]))

    result = resolver.resolve("picker", "ctrl+n", context={"a": True, "b": True})

    assert result.match is not None
    assert result.match.binding.id == "high"


def test_resolver_sees_registry_updates() -> None:
    registry = build_registry([make_binding("nav")])
    resolver = KeymapResolver(registry)
    assert resolver.resolve("picker", "ctrl+n").status == "match"

    registry.unregister_binding("nav")

    assert resolver.resolve("picker", "ctrl+n").status == "miss"


def test_default_picker_keymap_gates_navigation() -> None:
    resolver = default_resolver()
    flags = {"preview_visible": True, "replaying": False, "quick_only": False}

    nav = resolver.resolve(PICKER_MODE, "ctrl+n", context=flags)
    replay = resolver.resolve(PICKER_MODE, "ctrl+n", context={**flags, "replaying": True})
    submit = resolver.resolve(PICKER_MODE, "enter", context={})

    assert nav.match is not None and nav.match.action.id == "picker.next"
    assert replay.status == "miss"
    assert submit.match is not None and submit.match.action.id == "picker.submit"
    assert resolver.resolve(PICKER_MODE, "a", context=flags).status == "miss"
