"""Turn raw script text into typed operations.

Parsing is total: any line that does not describe one of the four commands
becomes ``Invalid`` instead of raising. Only a malformed header line makes
``parse_script`` give up on the whole input.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .models import Append, Delete, Invalid, Operation, Print, Undo

_COUNT_PATTERN = re.compile(r"\+?[0-9]+")

APPEND_CODE = "1"
DELETE_CODE = "2"
PRINT_CODE = "3"
UNDO_CODE = "4"


def parse_count(text: str) -> Optional[int]:
    """Parse a non-negative decimal integer, or return ``None``."""

    if _COUNT_PATTERN.fullmatch(text) is None:
        return None
    return int(text)


def _drop_separator(remainder: str) -> str:
    # Only the single character after the command code is a separator; any
    # further leading whitespace belongs to the argument.
    return remainder[1:]


def _parse_numeric(
    remainder: str, build: Callable[[int], Operation]
) -> Operation:
    value = parse_count(_drop_separator(remainder).strip())
    if value is None:
        return Invalid()
    return build(value)


_NUMERIC_COMMANDS: Dict[str, Callable[[int], Operation]] = {
    DELETE_CODE: Delete,
    PRINT_CODE: Print,
}


def parse_operation(line: str) -> Operation:
    """Map one script line onto exactly one ``Operation`` variant."""

    stripped = line.lstrip()
    if not stripped:
        return Invalid()

    code, remainder = stripped[0], stripped[1:]
    if code == APPEND_CODE:
        return Append(_drop_separator(remainder))
    build = _NUMERIC_COMMANDS.get(code)
    if build is not None:
        return _parse_numeric(remainder, build)
    if code == UNDO_CODE:
        return Undo()
    return Invalid()


def iter_lines(text: str) -> Iterator[str]:
    """Yield lines split on ``\\n`` with a trailing ``\\r`` removed.

    A newline terminating the input does not open an extra empty line.
    """

    if not text:
        return
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def parse_script(text: str) -> Optional[Tuple[int, List[Operation]]]:
    """Parse a whole script into its declared count and ordered operations.

    Returns ``None`` when the first line is not a non-negative integer. Lines
    that fail to parse are kept as ``Invalid`` so callers decide whether to
    filter them.
    """

    lines = iter_lines(text)
    header = next(lines, "")
    declared_count = parse_count(header)
    if declared_count is None:
        return None
    return declared_count, [parse_operation(line) for line in lines]


__all__ = [
    "APPEND_CODE",
    "DELETE_CODE",
    "PRINT_CODE",
    "UNDO_CODE",
    "iter_lines",
    "parse_count",
    "parse_operation",
    "parse_script",
]
