"""Runtime services shared by every picker component."""

from . import telemetry

__all__ = ["telemetry"]
