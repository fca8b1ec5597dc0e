"""Engine ceilings and their environment overrides."""

from __future__ import annotations

from dataclasses import dataclass

from script_editor.runtime.telemetry import env

MAX_OPERATIONS = 1_000_000
MAX_DELETED_CHARS = MAX_OPERATIONS * 2


def _env_int(name: str, fallback: int) -> int:
    value = env(name)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


@dataclass(frozen=True, slots=True)
class EngineLimits:
    """Upper bounds enforced by ``TextBuffer.apply``.

    ``max_operations`` caps the length of one applied sequence and
    ``max_deleted_chars`` caps the characters removed by deletes across it.
    """

    max_operations: int = MAX_OPERATIONS
    max_deleted_chars: int = MAX_DELETED_CHARS

    def __post_init__(self) -> None:
        if self.max_operations < 0:
            raise ValueError("max_operations cannot be negative")
        if self.max_deleted_chars < 0:
            raise ValueError("max_deleted_chars cannot be negative")

    @classmethod
    def from_env(cls) -> "EngineLimits":
        return cls(
            max_operations=_env_int("MAX_OPERATIONS", MAX_OPERATIONS),
            max_deleted_chars=_env_int("MAX_DELETED", MAX_DELETED_CHARS),
        )


DEFAULT_LIMITS = EngineLimits()

__all__ = ["EngineLimits", "DEFAULT_LIMITS", "MAX_OPERATIONS", "MAX_DELETED_CHARS"]
