"""Tests for gateway-to-resolver forwarding and trace header injection."""

from __future__ import annotations

import httpx
import pytest
from opentelemetry.trace import SpanKind, format_span_id, format_trace_id

from cepweather.adapters import RelayedResponse, ResolverForwardingAdapter, UpstreamError


def test_adapters_forwarding_sends_raw_body_with_traceparent(mock_client_factory, root_scope, span_exporter) -> None:
    """Post the unchanged body to `/cep` with a traceparent naming the client span.

    Returns:
        None: Assertions validate body passthrough, headers and relayed response.

    Raises:
        AssertionError: Raised when forwarding is incorrect.
    """

    raw_body = b'{ "cep" : "58045040" ,"note":"kept as-is"}'
    captured_requests: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(request)
        return httpx.Response(
            404,
            content=b"can not find zipcode",
            headers={"content-type": "text/plain; charset=utf-8"},
        )

    adapter = ResolverForwardingAdapter(base_url="http://resolver.test:8081/", client_factory=mock_client_factory(_handler))

    relayed = adapter.adapter_forward(raw_body, root_scope)

    assert relayed == RelayedResponse(
        status_code=404,
        body=b"can not find zipcode",
        content_type="text/plain; charset=utf-8",
    )
    request = captured_requests[0]
    assert request.method == "POST"
    assert str(request.url) == "http://resolver.test:8081/cep"
    assert request.content == raw_body

    spans = span_exporter.get_finished_spans()
    assert len(spans) == 1
    client_span = spans[0]
    assert client_span.kind == SpanKind.CLIENT
    version, trace_id, span_id, _flags = request.headers["traceparent"].split("-")
    assert version == "00"
    assert trace_id == format_trace_id(client_span.context.trace_id)
    assert span_id == format_span_id(client_span.context.span_id)


def test_adapters_forwarding_transport_error_raises_upstream_error(mock_client_factory, root_scope) -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    adapter = ResolverForwardingAdapter(base_url="http://resolver.test", client_factory=mock_client_factory(_handler))

    with pytest.raises(UpstreamError):
        adapter.adapter_forward(b'{"cep":"58045040"}', root_scope)
