import pytest

from register_preview.classification import TypeTag
from register_preview.commands import (
    DEFAULT_DESCRIPTOR,
    ActionKind,
    CommandDescriptor,
    DescriptorRegistry,
    load_default_descriptors,
)
from register_preview.errors import DescriptorError


def make_descriptor(**overrides: object) -> CommandDescriptor:
    values: dict[str, object] = {
        "accepted_types": {TypeTag.TEXT},
        "prompt_message": "Append to register `%s'",
        "action": ActionKind.MODIFY,
        "strict_match": True,
    }
    values.update(overrides)
    return CommandDescriptor(**values)  # type: ignore[arg-type]


def test_unknown_command_resolves_to_default() -> None:
    registry = DescriptorRegistry()

    descriptor = registry.lookup("some-unannotated-command")

    assert descriptor is DEFAULT_DESCRIPTOR
    assert descriptor.accepts_all
    assert descriptor.action is ActionKind.SET
    assert descriptor.strict_match is False
    assert descriptor.format_prompt("q") == "Overwrite entry 'q'"


def test_missing_command_id_resolves_to_default() -> None:
    registry = DescriptorRegistry()

    assert registry.lookup(None) is DEFAULT_DESCRIPTOR


def test_register_overrides_existing_descriptor() -> None:
    registry = DescriptorRegistry()
    first = make_descriptor()
    second = make_descriptor(strict_match=False)

    registry.register("append", first)
    registry.register("append", second)

    assert registry.lookup("append") is second
    assert registry.stats().command_count == 1
    assert registry.revision() == 2


def test_default_descriptors_are_loaded() -> None:
    registry = DescriptorRegistry()
    load_default_descriptors(registry)

    insert = registry.lookup("insert-register")
    jump = registry.lookup("jump-to-register")
    copy = registry.lookup("copy-to-register")

    assert insert.action is ActionKind.INSERT
    assert insert.accepted_types == {TypeTag.TEXT, TypeTag.NUMBER}
    assert TypeTag.KEY_MACRO in jump.accepted_types
    assert copy.action is ActionKind.SET and not copy.strict_match
    assert "view-register" in registry


def test_descriptor_rejects_bad_prompt() -> None:
    with pytest.raises(DescriptorError):
        make_descriptor(prompt_message="no placeholder")
    with pytest.raises(DescriptorError):
        make_descriptor(prompt_message="%s and %s")


def test_descriptor_rejects_prompt_with_other_conversions() -> None:
    with pytest.raises(DescriptorError, match="not a valid format string"):
        make_descriptor(prompt_message="Copy %d to %s")

    descriptor = make_descriptor(prompt_message="100%% into %s")
    assert descriptor.format_prompt("a") == "100% into a"


def test_descriptor_rejects_empty_types() -> None:
    with pytest.raises(DescriptorError):
        make_descriptor(accepted_types=set())


def test_read_actions_need_entries() -> None:
    assert ActionKind.INSERT.needs_entries
    assert ActionKind.JUMP.needs_entries
    assert ActionKind.VIEW.needs_entries
    assert not ActionKind.MODIFY.needs_entries
    assert not ActionKind.SET.needs_entries
