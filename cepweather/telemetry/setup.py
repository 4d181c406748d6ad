"""OpenTelemetry tracer provider and logging setup for service startup."""

from __future__ import annotations

import logging

from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

logger = logging.getLogger(__name__)

SERVICE_VERSION_VALUE = "1.0.0"
_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class TelemetrySetupError(RuntimeError):
    """Raised when the tracing pipeline cannot be initialized at startup."""


def _telemetry_otlp_exporter(endpoint: str):
    """Build the OTLP/HTTP span exporter for a collector endpoint."""
    from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter

    if not endpoint.endswith("/v1/traces"):
        endpoint = endpoint.rstrip("/") + "/v1/traces"
    return OTLPSpanExporter(endpoint=endpoint)


def telemetry_create_tracer_provider(
    service_name: str,
    environment_name: str,
    otlp_endpoint: str | None = None,
    console_exporter_enabled: bool = False,
) -> TracerProvider:
    """Create a tracer provider exporting spans to the configured sinks.

    The provider is returned rather than installed globally; callers obtain
    tracers from it and pass them explicitly.

    Args:
        service_name: Value for the `service.name` resource attribute.
        environment_name: Deployment environment label.
        otlp_endpoint: Optional OTLP/HTTP collector base URL.
        console_exporter_enabled: Whether to pretty-print spans to stdout.

    Returns:
        TracerProvider: Configured SDK tracer provider.

    Raises:
        TelemetrySetupError: Raised when provider or exporter construction fails.
    """

    resource = Resource(attributes={
        SERVICE_NAME: service_name,
        SERVICE_VERSION: SERVICE_VERSION_VALUE,
        "deployment.environment": environment_name,
    })

    try:
        tracer_provider = TracerProvider(resource=resource)
        if otlp_endpoint:
            tracer_provider.add_span_processor(BatchSpanProcessor(_telemetry_otlp_exporter(otlp_endpoint)))
        if console_exporter_enabled:
            tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    except Exception as error:
        raise TelemetrySetupError(f"failed to initialize tracing for service={service_name}: {error}") from error

    logger.info(
        "tracing initialized service=%s otlp_endpoint=%s console=%s",
        service_name,
        otlp_endpoint or "-",
        console_exporter_enabled,
    )
    return tracer_provider


def telemetry_configure_logging(level: str) -> None:
    """Configure root logging once for the process.

    Args:
        level: Logging level name such as `INFO`.

    Returns:
        None: Configures logging as side effect.

    Raises:
        ValueError: Raised when the level name is unknown.
    """

    logging.basicConfig(level=level.upper(), format=_LOG_FORMAT, force=True)
