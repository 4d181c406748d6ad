"""Open-Meteo current weather adapter for coordinate to temperature lookup."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from cepweather.domain import GeoCoordinate, TemperatureReading
from cepweather.telemetry import TraceScope

from .http_transport import HttpClientFactory, adapter_default_client_factory, adapter_traced_request
from .interfaces import WeatherPort
from .lookup_errors import UpstreamError
from .payloads import OpenMeteoPayload

logger = logging.getLogger(__name__)


class OpenMeteoWeatherAdapter(WeatherPort):
    """Adapter for the Open-Meteo `/forecast?current_weather=true` endpoint."""

    def __init__(
        self,
        base_url: str = "https://api.open-meteo.com/v1",
        client_factory: HttpClientFactory | None = None,
    ):
        """Initialize Open-Meteo adapter.

        Args:
            base_url: Base URL of the Open-Meteo API.
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

    def adapter_source_name(self) -> str:
        """Return stable adapter source label.

        Returns:
            str: Source identifier.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        return "open_meteo"

    def adapter_fetch_temperature(self, coordinate: GeoCoordinate, trace_scope: TraceScope) -> TemperatureReading:
        """Fetch the current Celsius temperature at a coordinate.

        Args:
            coordinate: Target coordinate.
            trace_scope: Parent scope for the lookup span.

        Returns:
            TemperatureReading: Current temperature in Celsius.

        Raises:
            UpstreamError: Raised for transport, non-200 status, or decode failures.
        """

        request_url = (
            f"{self._base_url}/forecast?latitude={coordinate.latitude:f}"
            f"&longitude={coordinate.longitude:f}&current_weather=true"
        )
        logger.info("weather request url=%s trace_id=%s", request_url, trace_scope.trace_id)

        try:
            response = adapter_traced_request(
                client_factory=self._client_factory,
                trace_scope=trace_scope,
                span_name="open_meteo.current_weather",
                method="GET",
                url=request_url,
                peer_service=self.adapter_source_name(),
            )
        except httpx.HTTPError as error:
            raise UpstreamError(f"weather transport request failed: {error}") from error

        if response.status_code != httpx.codes.OK:
            logger.warning("weather response body=%s trace_id=%s", response.text, trace_scope.trace_id)
            raise UpstreamError(
                f"non-200 response from Open-Meteo: {response.status_code}",
                status_code=response.status_code,
                response_body=response.text,
            )

        try:
            payload = OpenMeteoPayload.model_validate_json(response.content)
        except ValidationError as error:
            raise UpstreamError("weather response decode failed", status_code=response.status_code) from error

        return TemperatureReading(celsius=payload.current_weather.temperature)
