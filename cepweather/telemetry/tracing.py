"""Explicit trace scope carrier and W3C trace context propagation.

Trace state is never read from the ambient OpenTelemetry context. Every
function that opens a span or performs an outbound call receives a `TraceScope`
and hands a child scope to the work it delegates, so the core runs against any
tracer, including an in-memory one in tests.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Mapping

from opentelemetry import trace
from opentelemetry.baggage.propagation import W3CBaggagePropagator
from opentelemetry.context import Context
from opentelemetry.propagators.composite import CompositePropagator
from opentelemetry.trace import Span, SpanKind, Status, StatusCode, format_trace_id
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator
from opentelemetry.util.types import Attributes

TRACE_PROPAGATOR = CompositePropagator([
    TraceContextTextMapPropagator(),
    W3CBaggagePropagator(),
])


@dataclass(frozen=True)
class TraceScope:
    """Immutable pairing of a tracer with the OpenTelemetry context to parent new spans on.

    Attributes:
        tracer: Tracer used to open spans in this scope.
        context: Parent context; empty for a fresh root trace.
    """

    tracer: trace.Tracer
    context: Context

    @property
    def trace_id(self) -> str:
        """Return the hex trace identifier of the active span, or empty string when none.

        Returns:
            str: 32-char lowercase hex trace id or `""`.

        Raises:
            RuntimeError: This property does not raise runtime errors.
        """

        span_context = trace.get_current_span(self.context).get_span_context()
        if not span_context.is_valid:
            return ""
        return format_trace_id(span_context.trace_id)

    @contextmanager
    def scope_start_span(
        self,
        name: str,
        kind: SpanKind = SpanKind.INTERNAL,
        attributes: Attributes = None,
    ) -> Iterator[tuple[Span, "TraceScope"]]:
        """Open a child span and yield it together with the scope it defines.

        The span is ended on exit. An exception escaping the block marks the
        span as failed and is re-raised.

        Args:
            name: Span name.
            kind: OpenTelemetry span kind.
            attributes: Optional initial span attributes.

        Yields:
            tuple[Span, TraceScope]: Started span and its child scope.

        Raises:
            Exception: Re-raises any exception raised inside the block.
        """

        span = self.tracer.start_span(name, context=self.context, kind=kind, attributes=attributes)
        child_scope = TraceScope(tracer=self.tracer, context=trace.set_span_in_context(span, self.context))
        try:
            yield span, child_scope
        except Exception as error:
            span.set_status(Status(StatusCode.ERROR, str(error)))
            span.record_exception(error)
            raise
        finally:
            span.end()

    def scope_inject_headers(self, headers: Mapping[str, str] | None = None) -> dict[str, str]:
        """Return a copy of outbound headers carrying this scope's trace context.

        Args:
            headers: Optional base headers to extend.

        Returns:
            dict[str, str]: Headers with `traceparent` (and `baggage` when set) added.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        carrier = dict(headers or {})
        TRACE_PROPAGATOR.inject(carrier, context=self.context)
        return carrier


def telemetry_new_root_scope(tracer: trace.Tracer) -> TraceScope:
    """Build a scope whose first span starts a fresh trace.

    Args:
        tracer: Tracer used to open spans.

    Returns:
        TraceScope: Scope with an empty parent context.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return TraceScope(tracer=tracer, context=Context())


def telemetry_scope_from_headers(tracer: trace.Tracer, headers: Mapping[str, str]) -> TraceScope:
    """Rebuild a scope from inbound transport headers.

    When the headers carry no valid `traceparent`, the resulting scope starts a
    fresh root trace.

    Args:
        tracer: Tracer used to open spans.
        headers: Inbound HTTP headers with lowercase keys.

    Returns:
        TraceScope: Scope parented on the remote span context when present.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    extracted_context = TRACE_PROPAGATOR.extract(carrier=dict(headers), context=Context())
    return TraceScope(tracer=tracer, context=extracted_context)
