"""Shared pytest fixtures for in-memory tracing and upstream HTTP doubles."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from cepweather.telemetry import TraceScope, telemetry_new_root_scope


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    """Return an exporter collecting finished spans in memory."""

    return InMemorySpanExporter()


@pytest.fixture
def tracer_provider(span_exporter: InMemorySpanExporter) -> TracerProvider:
    """Return a tracer provider exporting synchronously to the in-memory exporter."""

    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider


@pytest.fixture
def tracer(tracer_provider: TracerProvider):
    """Return a tracer bound to the in-memory provider."""

    return tracer_provider.get_tracer("cepweather-tests")


@pytest.fixture
def root_scope(tracer) -> TraceScope:
    """Return a scope that starts a fresh trace."""

    return telemetry_new_root_scope(tracer)


MockHandler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def mock_client_factory() -> Callable[[MockHandler], Callable[[], httpx.Client]]:
    """Return a builder of HTTP client factories backed by `httpx.MockTransport`.

    Returns:
        Callable: Builder taking a request handler and returning a client factory.

    Raises:
        RuntimeError: This fixture does not raise runtime errors.
    """

    def _build(handler: MockHandler) -> Callable[[], httpx.Client]:
        return lambda: httpx.Client(transport=httpx.MockTransport(handler))

    return _build
