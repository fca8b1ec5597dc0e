"""Errors raised by the buffer engine."""

from __future__ import annotations


class ScriptPreconditionError(RuntimeError):
    """Raised when an applied script violates one of the engine ceilings."""


class OperationLimitError(ScriptPreconditionError):
    """More operations were supplied than ``EngineLimits.max_operations``."""

    def __init__(self, count: int, limit: int) -> None:
        super().__init__(
            f"The input exceeds the max number of operations permitted ({limit}); "
            f"received {count}."
        )
        self.count = count
        self.limit = limit


class OperationCountMismatch(ScriptPreconditionError):
    """The declared operation count differs from the operations supplied."""

    def __init__(self, declared: int, actual: int) -> None:
        super().__init__(
            "The provided count doesn't match the number of operations "
            f"(count = {declared}, operations = {actual})."
        )
        self.declared = declared
        self.actual = actual


class DeleteLimitError(ScriptPreconditionError):
    """Deletes in one ``apply`` call removed more than the allowed total."""

    def __init__(self, deleted: int, limit: int) -> None:
        super().__init__(
            "The input exceeds the max number of characters which can be "
            f"deleted ({limit}); requested {deleted}."
        )
        self.deleted = deleted
        self.limit = limit


class BufferConsumedError(RuntimeError):
    """Raised when a buffer is used after its output was taken."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Buffer '{name}' was already consumed by output()")
        self.name = name


__all__ = [
    "ScriptPreconditionError",
    "OperationLimitError",
    "OperationCountMismatch",
    "DeleteLimitError",
    "BufferConsumedError",
]
