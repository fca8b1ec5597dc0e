"""Runtime services (telemetry) shared by the parser, engine, and runner."""

from . import telemetry

__all__ = ["telemetry"]
