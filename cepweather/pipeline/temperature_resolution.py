"""Sequential postal code -> city -> coordinates -> temperature pipeline."""

from __future__ import annotations

import logging
from typing import Final

from opentelemetry.trace import Status, StatusCode

from cepweather.adapters import GeocodingPort, LocalityLookupPort, WeatherPort
from cepweather.domain import domain_build_temperature_report, domain_validate_postal_code
from cepweather.telemetry import TraceScope

from .interfaces import PipelineOutcome, TemperaturePipelinePort

logger = logging.getLogger(__name__)

MESSAGE_INVALID_ZIPCODE: Final[str] = "invalid zipcode"
MESSAGE_ZIPCODE_NOT_FOUND: Final[str] = "can not find zipcode"
MESSAGE_COULD_NOT_GET_TEMPERATURE: Final[str] = "could not get temperature"


class TemperatureResolutionPipeline(TemperaturePipelinePort):
    """Orchestrates the three dependent lookups behind the resolver endpoint.

    Stages run strictly in order, one attempt each. Every stage failure is
    translated into its terminal outcome at the stage boundary:

    - invalid postal code -> 422
    - locality not found -> 404
    - geocoding failure of any kind -> 404 (same message as locality not found)
    - weather failure -> 500
    """

    def __init__(
        self,
        locality_adapter: LocalityLookupPort,
        geocoding_adapter: GeocodingPort,
        weather_adapter: WeatherPort,
    ):
        """Initialize pipeline dependencies.

        Args:
            locality_adapter: Postal code to locality adapter.
            geocoding_adapter: Locality to coordinate adapter.
            weather_adapter: Coordinate to temperature adapter.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when a dependency is missing.
        """

        if locality_adapter is None:
            raise ValueError("locality_adapter must not be None")
        if geocoding_adapter is None:
            raise ValueError("geocoding_adapter must not be None")
        if weather_adapter is None:
            raise ValueError("weather_adapter must not be None")

        self._locality_adapter = locality_adapter
        self._geocoding_adapter = geocoding_adapter
        self._weather_adapter = weather_adapter

    def pipeline_resolve(self, postal_code: str, trace_scope: TraceScope) -> PipelineOutcome:
        """Resolve a postal code to a three-unit temperature report.

        Args:
            postal_code: Postal code token as received.
            trace_scope: Parent scope for stage spans.

        Returns:
            PipelineOutcome: 200 with report, or 422/404/500 with a plain message.

        Raises:
            RuntimeError: Raised only for unexpected programming errors.
        """

        with trace_scope.scope_start_span("pipeline.validate") as (span, _):
            if not domain_validate_postal_code(postal_code):
                return self._pipeline_fail(span, 422, MESSAGE_INVALID_ZIPCODE)

        with trace_scope.scope_start_span("pipeline.resolve_city") as (span, stage_scope):
            city_record = self._locality_adapter.adapter_resolve_city(postal_code, stage_scope)
            if city_record.not_found:
                return self._pipeline_fail(span, 404, MESSAGE_ZIPCODE_NOT_FOUND)
            span.set_attribute("cepweather.city", city_record.locality)

        with trace_scope.scope_start_span("pipeline.resolve_coordinates") as (span, stage_scope):
            try:
                coordinate = self._geocoding_adapter.adapter_resolve_coordinates(city_record.locality, stage_scope)
            except LookupError as error:
                logger.warning(
                    "geocoding failed city=%s trace_id=%s error=%s",
                    city_record.locality,
                    trace_scope.trace_id,
                    error,
                )
                return self._pipeline_fail(span, 404, MESSAGE_ZIPCODE_NOT_FOUND, error)

        with trace_scope.scope_start_span("pipeline.resolve_temperature") as (span, stage_scope):
            try:
                reading = self._weather_adapter.adapter_fetch_temperature(coordinate, stage_scope)
            except LookupError as error:
                logger.warning(
                    "weather lookup failed city=%s trace_id=%s error=%s",
                    city_record.locality,
                    trace_scope.trace_id,
                    error,
                )
                return self._pipeline_fail(span, 500, MESSAGE_COULD_NOT_GET_TEMPERATURE, error)

        report = domain_build_temperature_report(city=city_record.locality, reading=reading)
        return PipelineOutcome(status_code=200, report=report)

    def _pipeline_fail(
        self,
        span,
        status_code: int,
        message: str,
        error: Exception | None = None,
    ) -> PipelineOutcome:
        """Mark a stage span as failed and build its terminal outcome.

        Args:
            span: Active stage span.
            status_code: Terminal HTTP status.
            message: Terminal plain-text message.
            error: Optional translated exception, recorded on the span.

        Returns:
            PipelineOutcome: Failure outcome.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        span.set_attribute("cepweather.outcome.status_code", status_code)
        span.set_status(Status(StatusCode.ERROR, message))
        if error is not None:
            span.record_exception(error)
        return PipelineOutcome(status_code=status_code, message=message)
