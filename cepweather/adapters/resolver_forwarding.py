"""Gateway adapter forwarding validated requests to the resolver service."""

from __future__ import annotations

import httpx

from cepweather.telemetry import TraceScope

from .http_transport import HttpClientFactory, adapter_default_client_factory, adapter_traced_request
from .interfaces import RelayedResponse, ResolverRelayPort
from .lookup_errors import UpstreamError


class ResolverForwardingAdapter(ResolverRelayPort):
    """Adapter for `POST {resolver}/cep` with W3C trace context propagation."""

    def __init__(self, base_url: str, client_factory: HttpClientFactory | None = None):
        """Initialize resolver forwarding adapter.

        Args:
            base_url: Base URL of the resolver service.
            client_factory: Optional factory returning a fresh HTTP client per call.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when base_url is blank.
        """

        normalized_base_url = base_url.strip()
        if not normalized_base_url:
            raise ValueError("base_url must not be blank")

        self._base_url = normalized_base_url.rstrip("/")
        self._client_factory = client_factory or adapter_default_client_factory

    def adapter_forward(self, raw_body: bytes, trace_scope: TraceScope) -> RelayedResponse:
        """Forward the unchanged body and capture the resolver response.

        Args:
            raw_body: Original inbound request body.
            trace_scope: Scope whose span parents the forward call.

        Returns:
            RelayedResponse: Resolver status code, body bytes and content type.

        Raises:
            UpstreamError: Raised when the resolver cannot be reached.
        """

        try:
            response = adapter_traced_request(
                client_factory=self._client_factory,
                trace_scope=trace_scope,
                span_name="gateway.forward_to_resolver",
                method="POST",
                url=f"{self._base_url}/cep",
                headers={"Content-Type": "application/json"},
                content=raw_body,
                propagate_trace=True,
            )
        except httpx.HTTPError as error:
            raise UpstreamError(f"resolver transport request failed: {error}") from error

        return RelayedResponse(
            status_code=response.status_code,
            body=response.content,
            content_type=response.headers.get("content-type"),
        )
