"""Nominatim geocoding adapter for locality to coordinate resolution."""

from __future__ import annotations

import logging
from typing import Final
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from cepweather.domain import GeoCoordinate
from cepweather.telemetry import TraceScope

from .http_transport import HttpClientFactory, adapter_default_client_factory, adapter_traced_request
from .interfaces import GeocodingPort
from .lookup_errors import LocationNotFoundError, UpstreamError
from .payloads import NOMINATIM_RESULTS_ADAPTER

logger = logging.getLogger(__name__)


class NominatimGeocodingAdapter(GeocodingPort):
    """Adapter for the OpenStreetMap Nominatim `/search` endpoint."""

    DEFAULT_USER_AGENT: Final[str] = "cepweather/1.0 (Python/httpx)"

    def __init__(
        self,
        base_url: str = "https://nominatim.openstreetmap.org",
        user_agent: str = DEFAULT_USER_AGENT,
        client_factory: HttpClientFactory | None = None,
    ):
        """Initialize Nominatim adapter.

        Args:
            base_url: Base URL of the Nominatim service.
            user_agent: `User-Agent` header sent with every search.
            client_factory: Optional factory returning a fresh HTTP client per call.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required config values are blank.
        """

        normalized_base_url = base_url.strip()
        normalized_user_agent = user_agent.strip()
        if not normalized_base_url:
            raise ValueError("base_url must not be blank")
        if not normalized_user_agent:
            raise ValueError("user_agent must not be blank")

        self._base_url = normalized_base_url.rstrip("/")
        self._user_agent = normalized_user_agent
        self._client_factory = client_factory or adapter_default_client_factory

    def adapter_source_name(self) -> str:
        """Return stable adapter source label.

        Returns:
            str: Source identifier.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        return "nominatim"

    def adapter_resolve_coordinates(self, locality: str, trace_scope: TraceScope) -> GeoCoordinate:
        """Geocode one locality name and return the first match.

        Args:
            locality: Non-empty locality name; URL-encoded before sending.
            trace_scope: Parent scope for the lookup span.

        Returns:
            GeoCoordinate: Coordinates of the first match.

        Raises:
            ValueError: Raised when locality is blank.
            UpstreamError: Raised for transport, non-200 status, or decode failures.
            LocationNotFoundError: Raised when the provider returns no matches.
        """

        if not locality.strip():
            raise ValueError("locality must not be blank")

        request_url = f"{self._base_url}/search?{urlencode({'format': 'json', 'q': locality})}"
        try:
            response = adapter_traced_request(
                client_factory=self._client_factory,
                trace_scope=trace_scope,
                span_name="nominatim.search",
                method="GET",
                url=request_url,
                peer_service=self.adapter_source_name(),
                headers={"User-Agent": self._user_agent},
            )
        except httpx.HTTPError as error:
            raise UpstreamError(f"geocoding transport request failed: {error}") from error

        if response.status_code != httpx.codes.OK:
            logger.warning(
                "geocoding returned HTTP %s locality=%s trace_id=%s",
                response.status_code,
                locality,
                trace_scope.trace_id,
            )
            raise UpstreamError(
                f"non-200 response from geocoding service: {response.status_code}, body: {response.text}",
                status_code=response.status_code,
                response_body=response.text,
            )

        try:
            places = NOMINATIM_RESULTS_ADAPTER.validate_json(response.content)
        except ValidationError as error:
            raise UpstreamError("geocoding response decode failed", status_code=response.status_code) from error

        if not places:
            raise LocationNotFoundError(f"no geocoding results for locality={locality}")

        first_place = places[0]
        return GeoCoordinate(latitude=first_place.lat, longitude=first_place.lon)
