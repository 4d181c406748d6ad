"""Telemetry package for trace scope propagation and provider wiring."""

from .setup import (
    TelemetrySetupError,
    telemetry_configure_logging,
    telemetry_create_tracer_provider,
)
from .tracing import (
    TRACE_PROPAGATOR,
    TraceScope,
    telemetry_new_root_scope,
    telemetry_scope_from_headers,
)

__all__ = [
    "TRACE_PROPAGATOR",
    "TelemetrySetupError",
    "TraceScope",
    "telemetry_configure_logging",
    "telemetry_create_tracer_provider",
    "telemetry_new_root_scope",
    "telemetry_scope_from_headers",
]
