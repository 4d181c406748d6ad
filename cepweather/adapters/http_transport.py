"""Shared traced HTTP call helper for adapters."""

from __future__ import annotations

from typing import Callable, Mapping

import httpx
from opentelemetry.trace import SpanKind, Status, StatusCode

from cepweather.telemetry import TraceScope

HttpClientFactory = Callable[[], httpx.Client]


def adapter_default_client_factory() -> httpx.Client:
    """Return a fresh HTTP client with transport defaults.

    Returns:
        httpx.Client: New client; callers close it after one request.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return httpx.Client()


def adapter_traced_request(
    client_factory: HttpClientFactory,
    trace_scope: TraceScope,
    span_name: str,
    method: str,
    url: str,
    headers: Mapping[str, str] | None = None,
    content: bytes | None = None,
    propagate_trace: bool = False,
    peer_service: str | None = None,
) -> httpx.Response:
    """Execute one HTTP request inside a client span.

    The response body is fully read before the client is closed. Exactly one
    attempt is made.

    Args:
        client_factory: Factory returning a fresh HTTP client.
        trace_scope: Parent scope for the client span.
        span_name: Client span name.
        method: HTTP method.
        url: Absolute request URL.
        headers: Optional request headers.
        content: Optional raw request body.
        propagate_trace: Whether to inject trace context headers into the request.
        peer_service: Optional upstream label recorded as `peer.service`.

    Returns:
        httpx.Response: Completed response of any status.

    Raises:
        httpx.HTTPError: Raised for transport-level failures.
    """

    span_attributes = {"http.request.method": method, "url.full": url}
    if peer_service:
        span_attributes["peer.service"] = peer_service
    with trace_scope.scope_start_span(span_name, kind=SpanKind.CLIENT, attributes=span_attributes) as (span, child_scope):
        request_headers = dict(headers or {})
        if propagate_trace:
            request_headers = child_scope.scope_inject_headers(request_headers)
        with client_factory() as client:
            response = client.request(method, url, headers=request_headers, content=content)
        span.set_attribute("http.response.status_code", response.status_code)
        if response.status_code >= 400:
            span.set_status(Status(StatusCode.ERROR, f"HTTP {response.status_code}"))
        return response
