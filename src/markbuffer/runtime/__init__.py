"""Runtime services (telemetry, configuration) shared by the engine."""

from . import telemetry

__all__ = ["telemetry"]
