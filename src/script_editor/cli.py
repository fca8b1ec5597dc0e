"""Command-line runner: read a script, apply it, print the final buffer."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from script_editor.buffer import ScriptPreconditionError, TextBuffer, Writer
from script_editor.config import EngineLimits
from script_editor.ops import is_invalid, parse_script
from script_editor.runtime import telemetry


def run(
    text: str,
    *,
    writer: Optional[Writer] = None,
    keep_invalid: bool = False,
    limits: Optional[EngineLimits] = None,
) -> Optional[str]:
    """Parse and apply ``text``; return the final buffer.

    ``None`` means the header line was malformed and nothing was applied.
    Unless ``keep_invalid`` is set, unparseable lines are dropped before the
    declared count is checked.
    """

    parsed = parse_script(text)
    if parsed is None:
        telemetry.record_event("script.malformed_header", level="warning")
        return None

    declared_count, operations = parsed
    if not keep_invalid:
        operations = [op for op in operations if not is_invalid(op)]
    telemetry.record_event(
        "script.parsed",
        level="debug",
        data={"declared": declared_count, "operations": len(operations)},
    )

    buffer = TextBuffer("", declared_count, limits=limits, writer=writer)
    buffer.apply(operations)
    return buffer.output()


def _read_input(path: Optional[str], stdin: TextIO) -> str:
    if path is None or path == "-":
        return stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="script-editor",
        description="Apply an append/delete/print/undo script to a text buffer.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Script file to read (default: stdin, also '-')",
    )
    parser.add_argument(
        "--keep-invalid",
        action="store_true",
        help="Count unrecognized lines toward the declared operation count",
    )
    parser.add_argument(
        "--max-operations",
        type=int,
        default=None,
        help="Override the maximum number of operations per script",
    )
    parser.add_argument(
        "--max-deleted",
        type=int,
        default=None,
        help="Override the maximum number of characters deletes may remove",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log engine events to the console",
    )
    parser.add_argument(
        "--log-file",
        default=telemetry.env("LOG_FILE"),
        help="Write engine logs to this file",
    )
    return parser.parse_args(argv)


def _configure_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        telemetry.configure(preset="development")
    elif args.log_file:
        telemetry.configure(preset="production", log_file=args.log_file)
    else:
        telemetry.configure(preset="quiet")


def _limits_from_args(args: argparse.Namespace) -> EngineLimits:
    base = EngineLimits.from_env()
    return EngineLimits(
        max_operations=(
            base.max_operations
            if args.max_operations is None
            else args.max_operations
        ),
        max_deleted_chars=(
            base.max_deleted_chars if args.max_deleted is None else args.max_deleted
        ),
    )


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    args = _parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    try:
        _configure_logging(args)
        limits = _limits_from_args(args)
        text = _read_input(args.path, stdin)
    except (OSError, ValueError) as exc:
        print(f"script-editor: {exc}", file=stderr)
        return 1

    try:
        result = run(
            text,
            writer=lambda line: print(line, file=stdout),
            keep_invalid=args.keep_invalid,
            limits=limits,
        )
    except ScriptPreconditionError as exc:
        print(f"script-editor: {exc}", file=stderr)
        return 1

    if result is not None:
        print(result, file=stdout)
    return 0


__all__ = ["main", "run"]
