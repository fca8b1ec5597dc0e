import pytest

from script_editor.config import (
    DEFAULT_LIMITS,
    MAX_DELETED_CHARS,
    MAX_OPERATIONS,
    EngineLimits,
)


def test_default_limits() -> None:
    assert DEFAULT_LIMITS.max_operations == MAX_OPERATIONS == 1_000_000
    assert DEFAULT_LIMITS.max_deleted_chars == MAX_DELETED_CHARS == 2_000_000


def test_limits_reject_negative_values() -> None:
    with pytest.raises(ValueError):
        EngineLimits(max_operations=-1)
    with pytest.raises(ValueError):
        EngineLimits(max_deleted_chars=-5)


def test_limits_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCRIPT_EDITOR_MAX_OPERATIONS", "10")
    monkeypatch.setenv("SCRIPT_EDITOR_MAX_DELETED", "not-a-number")

    limits = EngineLimits.from_env()

    assert limits.max_operations == 10
    assert limits.max_deleted_chars == MAX_DELETED_CHARS


def test_limits_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SCRIPT_EDITOR_MAX_OPERATIONS", raising=False)
    monkeypatch.delenv("SCRIPT_EDITOR_MAX_DELETED", raising=False)

    assert EngineLimits.from_env() == DEFAULT_LIMITS
