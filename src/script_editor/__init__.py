"""Undoable text buffer driven by append/delete/print/undo scripts."""

__all__ = [
    "buffer",
    "cli",
    "config",
    "ops",
    "runtime",
]

__version__ = "0.1.0"
