"""Dataclasses describing the operations a script can contain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Append:
    """Append ``text`` to the end of the buffer (command ``1``)."""

    text: str


@dataclass(frozen=True, slots=True)
class Delete:
    """Remove ``count`` characters from the end of the buffer (command ``2``)."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("delete count cannot be negative")


@dataclass(frozen=True, slots=True)
class Print:
    """Emit the character at 1-based ``index`` (command ``3``)."""

    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("print index cannot be negative")


@dataclass(frozen=True, slots=True)
class Undo:
    """Revert the latest applied append or delete (command ``4``)."""


@dataclass(frozen=True, slots=True)
class Invalid:
    """Any line that is not a recognized command; applying it does nothing."""


Operation = Union[Append, Delete, Print, Undo, Invalid]


def is_invalid(operation: Operation) -> bool:
    return isinstance(operation, Invalid)


__all__ = [
    "Append",
    "Delete",
    "Print",
    "Undo",
    "Invalid",
    "Operation",
    "is_invalid",
]
