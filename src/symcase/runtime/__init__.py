"""Runtime services shared by every layer."""

from . import telemetry

__all__ = ["telemetry"]
