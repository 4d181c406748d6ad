"""Resolver router: postal code to temperature report endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response
from opentelemetry import trace
from opentelemetry.trace import SpanKind

from cepweather.domain import RequestFormatError, domain_parse_postal_code_request
from cepweather.pipeline import TemperaturePipelinePort
from cepweather.telemetry import telemetry_scope_from_headers

from ..responses import api_plain_text_response, api_read_raw_body

logger = logging.getLogger(__name__)


def api_create_resolver_router(pipeline: TemperaturePipelinePort, tracer: trace.Tracer) -> APIRouter:
    """Create resolver router exposing `POST /cep`.

    Args:
        pipeline: Temperature resolution pipeline.
        tracer: Tracer for request spans.

    Returns:
        APIRouter: Router exposing the resolver endpoint.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if pipeline is None:
        raise ValueError("pipeline must not be None")
    if tracer is None:
        raise ValueError("tracer must not be None")

    router = APIRouter(tags=["resolver"])

    @router.post("/cep")
    def api_resolver_handle_request(request: Request, raw_body: bytes = Depends(api_read_raw_body)) -> Response:
        """Resolve the posted postal code to a temperature report.

        Args:
            request: Inbound request, used for trace headers.
            raw_body: Untouched request body.

        Returns:
            Response: 200 JSON report, or 400/422/404/500 plain text.

        Raises:
            RuntimeError: Raised only for unexpected programming errors.
        """

        inbound_scope = telemetry_scope_from_headers(tracer, request.headers)
        span_attributes = {"http.request.method": "POST", "http.route": "/cep"}
        with inbound_scope.scope_start_span(
            "resolver.handle_request",
            kind=SpanKind.SERVER,
            attributes=span_attributes,
        ) as (span, request_scope):
            try:
                postal_code = domain_parse_postal_code_request(raw_body)
            except RequestFormatError as error:
                return api_plain_text_response(span, error.status_code, error.public_message)

            outcome = pipeline.pipeline_resolve(postal_code, request_scope)
            if not outcome.outcome_is_success():
                logger.info(
                    "resolution failed status=%s trace_id=%s",
                    outcome.status_code,
                    request_scope.trace_id,
                )
                return api_plain_text_response(span, outcome.status_code, outcome.message or "")

            span.set_attribute("http.response.status_code", status.HTTP_200_OK)
            return JSONResponse(content=outcome.report.report_as_payload(), status_code=status.HTTP_200_OK)

    return router
