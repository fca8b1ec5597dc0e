"""Operation model and the parser that produces it."""

from .models import Append, Delete, Invalid, Operation, Print, Undo, is_invalid
from .parser import parse_count, parse_operation, parse_script

__all__ = [
    "Append",
    "Delete",
    "Print",
    "Undo",
    "Invalid",
    "Operation",
    "is_invalid",
    "parse_count",
    "parse_operation",
    "parse_script",
]
