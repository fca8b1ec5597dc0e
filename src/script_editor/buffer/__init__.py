"""Buffer engine and undo history."""

from .buffer import TextBuffer, Writer
from .errors import (
    BufferConsumedError,
    DeleteLimitError,
    OperationCountMismatch,
    OperationLimitError,
    ScriptPreconditionError,
)
from .undo import UndoAppend, UndoDelete, UndoEntry, UndoHistory

__all__ = [
    "TextBuffer",
    "Writer",
    "UndoAppend",
    "UndoDelete",
    "UndoEntry",
    "UndoHistory",
    "ScriptPreconditionError",
    "OperationLimitError",
    "OperationCountMismatch",
    "DeleteLimitError",
    "BufferConsumedError",
]
