"""Front gateway router: validate inbound postal codes and relay to the resolver."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from opentelemetry import trace
from opentelemetry.trace import SpanKind

from cepweather.adapters import ResolverRelayPort
from cepweather.domain import InputValidationError, domain_parse_postal_code_request, domain_require_valid_postal_code
from cepweather.telemetry import telemetry_new_root_scope

from ..responses import api_plain_text_response, api_read_raw_body

logger = logging.getLogger(__name__)

MESSAGE_RESOLVER_UNREACHABLE = "could not communicate with resolver service"


def api_create_gateway_router(relay_adapter: ResolverRelayPort, tracer: trace.Tracer) -> APIRouter:
    """Create gateway router exposing `POST /`.

    Args:
        relay_adapter: Adapter forwarding validated requests to the resolver.
        tracer: Tracer for request spans.

    Returns:
        APIRouter: Router exposing the gateway endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if relay_adapter is None:
        raise ValueError("relay_adapter must not be None")
    if tracer is None:
        raise ValueError("tracer must not be None")

    router = APIRouter(tags=["gateway"])

    @router.post("/")
    def api_gateway_handle_request(raw_body: bytes = Depends(api_read_raw_body)) -> Response:
        """Validate the postal code and relay the resolver response verbatim.

        Every request starts a new trace; inbound trace headers are ignored.

        Args:
            raw_body: Untouched request body.

        Returns:
            Response: 400/422/500 plain text, or the resolver's status and bytes.

        Raises:
            RuntimeError: Raised only for unexpected programming errors.
        """

        root_scope = telemetry_new_root_scope(tracer)
        span_attributes = {"http.request.method": "POST", "http.route": "/"}
        with root_scope.scope_start_span(
            "gateway.handle_request",
            kind=SpanKind.SERVER,
            attributes=span_attributes,
        ) as (span, request_scope):
            try:
                postal_code = domain_parse_postal_code_request(raw_body)
                domain_require_valid_postal_code(postal_code)
            except InputValidationError as error:
                return api_plain_text_response(span, error.status_code, error.public_message)

            try:
                relayed = relay_adapter.adapter_forward(raw_body, request_scope)
            except LookupError as error:
                logger.error("resolver forward failed trace_id=%s error=%s", request_scope.trace_id, error)
                return api_plain_text_response(span, 500, MESSAGE_RESOLVER_UNREACHABLE)

            span.set_attribute("http.response.status_code", relayed.status_code)
            return Response(
                content=relayed.body,
                status_code=relayed.status_code,
                media_type=relayed.content_type,
            )

    return router
