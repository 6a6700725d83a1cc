"""Telemetry module for OpenTelemetry instrumentation."""
from organizer.telemetry.instrumentation import TelemetryManager

__all__ = [
    "TelemetryManager",
]
