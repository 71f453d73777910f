import pytest

from register_preview.config import DEFAULT_KEYS, PreviewMode, PreviewSettings
from register_preview.store import EntryStore, suggest_default_key


def test_defaults() -> None:
    settings = PreviewSettings()

    assert settings.mode is PreviewMode.ALWAYS
    assert settings.default_keys == DEFAULT_KEYS
    assert settings.default_keys[0] == "a" and settings.default_keys[-1] == "z"


def test_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REGISTER_PREVIEW_MODE", "Quick_Only")
    monkeypatch.setenv("REGISTER_PREVIEW_DEFAULT_KEYS", "xyz")
    monkeypatch.setenv("REGISTER_PREVIEW_MAX_DESCRIPTION", "30")

    settings = PreviewSettings.from_env()

    assert settings.mode is PreviewMode.QUICK_ONLY
    assert settings.default_keys == ("x", "y", "z")
    assert settings.max_description == 30


def test_from_env_ignores_bad_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REGISTER_PREVIEW_MODE", "sometimes")
    monkeypatch.setenv("REGISTER_PREVIEW_MAX_DESCRIPTION", "wide")

    settings = PreviewSettings.from_env()

    assert settings.mode is PreviewMode.ALWAYS
    assert settings.max_description == 60


def test_replace_returns_updated_copy() -> None:
    settings = PreviewSettings()

    updated = settings.replace(mode=PreviewMode.NEVER)

    assert updated.mode is PreviewMode.NEVER
    assert settings.mode is PreviewMode.ALWAYS


def test_default_keys_must_be_single_characters() -> None:
    with pytest.raises(ValueError):
        PreviewSettings(default_keys=("ab",))


def test_suggest_default_key_skips_used_keys() -> None:
    store = EntryStore({"a": "x", "b": "y"})

    assert suggest_default_key(store, DEFAULT_KEYS) == "c"
    assert suggest_default_key(store, ("a", "b")) is None


def test_store_rejects_multi_character_keys() -> None:
    with pytest.raises(ValueError):
        EntryStore({"ab": "x"})
