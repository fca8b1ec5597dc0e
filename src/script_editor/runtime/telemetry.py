"""Telemetry services built on the standard ``logging`` package.

The rest of the package only touches four entry points:

``configure(...)`` -- pick a preset or install handlers from the environment
``get_logger(name)`` -- fetch a logger under the package namespace
``record_event(name, ...)`` -- emit a structured event at a chosen level
``span(name, ...)`` -- time a block, logging its duration and any failure
"""

from __future__ import annotations

import json
import logging
import os
import time
import warnings
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

ENV_PREFIX = "SCRIPT_EDITOR_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "script_editor")
DEFAULT_LOG_FILE = os.getenv(f"{ENV_PREFIX}LOG_FILE", "")
PRESETS = ("development", "production", "quiet")

_TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_ROOT_NAME = "script_editor"


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> str:
    return " ".join(f"{key}={_stringify(value)}" for key, value in data.items())


def _resolve_level(level: Any) -> int:
    if isinstance(level, int):
        return level
    name = str(level).upper()
    if name == "WARN":
        name = "WARNING"
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unsupported log level '{level}'.")
    return resolved


class JsonFormatter(logging.Formatter):
    """One JSON object per record; the message is escaped by ``json.dumps``."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _file_handler(path: str, *, strict: bool) -> Optional[logging.Handler]:
    try:
        return logging.FileHandler(path, encoding="utf-8")
    except OSError as exc:
        if strict:
            raise
        warnings.warn(f"Ignoring log file '{path}': {exc}", RuntimeWarning)
        return None


def _preset_handlers(preset: str, log_file: Optional[str]) -> tuple[int, list]:
    key = preset.lower()
    handlers: list[logging.Handler] = []

    if key == "development":
        handlers.append(logging.StreamHandler())
        return logging.DEBUG, handlers
    if key == "production":
        path = log_file or DEFAULT_LOG_FILE or "script_editor.log"
        handlers.append(_file_handler(path, strict=True))
        return logging.INFO, handlers
    if key == "quiet":
        if log_file:
            handlers.append(_file_handler(log_file, strict=True))
        return logging.ERROR, handlers
    raise ValueError(f"Unknown preset '{preset}'.")


def _default_handlers() -> tuple[int, list]:
    handlers: list[logging.Handler] = []
    if not env_flag("DISABLE_CONSOLE", False):
        handlers.append(logging.StreamHandler())
    log_file = env("LOG_FILE") or DEFAULT_LOG_FILE
    if log_file:
        handler = _file_handler(log_file, strict=False)
        if handler is not None:
            handlers.append(handler)
    try:
        level = _resolve_level(env("LOG_LEVEL") or "WARNING")
    except ValueError:
        level = logging.WARNING
    return level, handlers


def configure(*, preset: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Replace the handlers on the package root logger.

    Parameters
    ----------
    preset:
        One of ``PRESETS``; without it the ``SCRIPT_EDITOR_*`` environment
        variables decide the level, console output, JSON format and log file.
    log_file:
        Output file used by the ``production`` and ``quiet`` presets.

    A preset raises ``OSError`` when its log file cannot be opened. The
    environment-driven default drops an unusable log file with a
    ``RuntimeWarning`` and falls back to ``WARNING`` for an unknown level.
    """

    if preset:
        level, handlers = _preset_handlers(preset, log_file)
    else:
        level, handlers = _default_handlers()

    json_output = env_flag("LOG_JSON", False)
    root = logging.getLogger(_ROOT_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setFormatter(
            JsonFormatter() if json_output else logging.Formatter(_TEXT_FORMAT)
        )
        root.addHandler(handler)
    if not handlers:
        root.addHandler(logging.NullHandler())
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``script_editor`` namespace."""

    return logging.getLogger(name or DEFAULT_LOGGER_NAME)


def record_event(
    name: str,
    *,
    level: str | int = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key=value pairs."""

    log = get_logger(logger_name)
    resolved = _resolve_level(level)
    if not log.isEnabledFor(resolved):
        return
    payload = {"event": name, **(data or {})}
    log.log(resolved, "event::%s %s", name, _format_pairs(payload))


@dataclass
class SpanHandle:
    """Handle yielded from ``span`` for metadata updates inside the block."""

    logger: logging.Logger
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _payload(self, extra: Optional[Dict[str, Any]] = None) -> str:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload.update(extra or {})
        return _format_pairs(payload)

    def fail(self, reason: str) -> None:
        self.logger.error("span::fail %s", self._payload({"reason": reason}))

    def finish(self, elapsed: float) -> None:
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                "span::end %s", self._payload({"elapsed_ms": f"{elapsed * 1000:.3f}"})
            )


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Time a code block and (optionally) tag it with a component name.

    Exceptions raised inside the block are logged through ``SpanHandle.fail``
    and re-raised unchanged.
    """

    component_name = name if component is True else None
    if isinstance(component, str):
        component_name = component

    handle = SpanHandle(
        logger=get_logger(logger_name),
        span_name=name,
        component_name=component_name,
        metadata={key: _stringify(value) for key, value in (metadata or {}).items()},
    )
    started = time.perf_counter()
    try:
        yield handle
    except Exception as exc:
        handle.fail(str(exc))
        raise
    finally:
        handle.finish(time.perf_counter() - started)


# Install handlers from the environment once at import time.
configure()

__all__ = [
    "PRESETS",
    "JsonFormatter",
    "SpanHandle",
    "configure",
    "env",
    "env_flag",
    "get_logger",
    "record_event",
    "span",
]
