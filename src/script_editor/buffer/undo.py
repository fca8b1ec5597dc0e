"""Undo history for buffer operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(slots=True)
class UndoAppend:
    """Inverse of an append: drop ``count`` characters from the end."""

    count: int


@dataclass(slots=True)
class UndoDelete:
    """Inverse of a delete.

    ``removed`` holds the deleted characters in the order they were popped,
    last buffer character first. They are put back in buffer order only when
    the entry is actually undone.
    """

    removed: List[str] = field(default_factory=list)

    def restored_text(self) -> str:
        return "".join(reversed(self.removed))


UndoEntry = Union[UndoAppend, UndoDelete]


class UndoHistory:
    """Linear stack of inverse operations; there is no redo."""

    def __init__(self) -> None:
        self._entries: List[UndoEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, entry: UndoEntry) -> None:
        self._entries.append(entry)

    def can_undo(self) -> bool:
        return bool(self._entries)

    def peek(self) -> Optional[UndoEntry]:
        if not self._entries:
            return None
        return self._entries[-1]

    def pop(self) -> Optional[UndoEntry]:
        if not self._entries:
            return None
        return self._entries.pop()


__all__ = ["UndoAppend", "UndoDelete", "UndoEntry", "UndoHistory"]
