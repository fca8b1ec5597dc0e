"""Character buffer that applies parsed operations with undo support."""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from script_editor.config import DEFAULT_LIMITS, EngineLimits
from script_editor.ops import Append, Delete, Invalid, Operation, Print, Undo
from script_editor.runtime import telemetry

from .errors import (
    BufferConsumedError,
    DeleteLimitError,
    OperationCountMismatch,
    OperationLimitError,
)
from .undo import UndoAppend, UndoDelete, UndoHistory

Writer = Callable[[str], None]

LOGGER_NAME = "script_editor.buffer"


def _print_line(line: str) -> None:
    print(line)


class TextBuffer:
    """Owns the characters, the undo history, and the declared operation count.

    A buffer is open until ``output()`` is called; after that every call
    raises ``BufferConsumedError``.
    """

    def __init__(
        self,
        initial: str = "",
        declared_count: int = 0,
        *,
        limits: Optional[EngineLimits] = None,
        writer: Optional[Writer] = None,
        name: str = "default",
    ) -> None:
        self.name = name
        self.declared_count = declared_count
        self.limits = limits or DEFAULT_LIMITS
        self.history = UndoHistory()
        self._chars: List[str] = list(initial)
        self._writer = writer or _print_line
        self._consumed = False

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def text(self) -> str:
        self._ensure_open()
        return "".join(self._chars)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def apply(self, operations: Iterable[Operation]) -> None:
        """Apply ``operations`` serially, in order.

        Raises ``OperationLimitError`` or ``OperationCountMismatch`` before
        anything is applied, and ``DeleteLimitError`` as soon as the deleted
        total passes ``limits.max_deleted_chars``. Nothing is rolled back.
        """

        self._ensure_open()
        ops = list(operations)
        with telemetry.span(
            name="buffer::apply",
            logger_name=LOGGER_NAME,
            component=True,
            metadata={"buffer": self.name, "operations": len(ops)},
        ):
            if len(ops) > self.limits.max_operations:
                raise OperationLimitError(len(ops), self.limits.max_operations)
            if len(ops) != self.declared_count:
                raise OperationCountMismatch(self.declared_count, len(ops))

            deleted_total = 0
            for op in ops:
                if isinstance(op, Append):
                    self._append(op.text)
                elif isinstance(op, Delete):
                    if op.count > len(self._chars):
                        self._skip(op)
                        continue
                    deleted_total += op.count
                    if deleted_total > self.limits.max_deleted_chars:
                        raise DeleteLimitError(
                            deleted_total, self.limits.max_deleted_chars
                        )
                    self._delete(op.count)
                elif isinstance(op, Print):
                    if not 1 <= op.index <= len(self._chars):
                        self._skip(op)
                        continue
                    self._writer(self._chars[op.index - 1])
                elif isinstance(op, Undo):
                    self._undo()
                elif not isinstance(op, Invalid):
                    raise TypeError(f"Unsupported operation {op!r}")

    def output(self) -> str:
        """Return the final buffer content and close the buffer."""

        self._ensure_open()
        self._consumed = True
        return "".join(self._chars)

    def _append(self, text: str) -> None:
        self._chars.extend(text)
        self.history.push(UndoAppend(len(text)))

    def _delete(self, count: int) -> None:
        chars = self._chars
        removed = [chars.pop() for _ in range(count)]
        self.history.push(UndoDelete(removed))

    def _undo(self) -> None:
        entry = self.history.pop()
        if entry is None:
            telemetry.record_event(
                "buffer.undo_empty",
                level="debug",
                data={"buffer": self.name},
                logger_name=LOGGER_NAME,
            )
            return
        if isinstance(entry, UndoAppend):
            if entry.count:
                del self._chars[-entry.count :]
        else:
            self._chars.extend(entry.restored_text())

    def _skip(self, op: Operation) -> None:
        telemetry.record_event(
            "buffer.skip",
            level="debug",
            data={"buffer": self.name, "operation": op, "length": len(self._chars)},
            logger_name=LOGGER_NAME,
        )

    def _ensure_open(self) -> None:
        if self._consumed:
            raise BufferConsumedError(self.name)


__all__ = ["TextBuffer", "Writer"]
