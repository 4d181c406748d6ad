"""Typed interfaces for adapter-layer responsibilities."""

from dataclasses import dataclass
from typing import Protocol

from cepweather.domain import CityRecord, GeoCoordinate, TemperatureReading
from cepweather.telemetry import TraceScope


@dataclass(frozen=True)
class RelayedResponse:
    """Resolver response captured verbatim by the gateway.

    Attributes:
        status_code: Resolver HTTP status.
        body: Raw response body bytes.
        content_type: Resolver `Content-Type` header, when present.
    """

    status_code: int
    body: bytes
    content_type: str | None = None


class LocalityLookupPort(Protocol):
    """Port definition for resolving postal codes to localities."""

    def adapter_resolve_city(self, postal_code: str, trace_scope: TraceScope) -> CityRecord:
        """Resolve one validated postal code to a locality.

        Args:
            postal_code: Eight-digit postal code.
            trace_scope: Scope for the lookup span.

        Returns:
            CityRecord: Locality record; `not_found` is set on any failure.

        Raises:
            RuntimeError: Implementations must not raise for upstream failures.
        """


class GeocodingPort(Protocol):
    """Port definition for resolving locality names to coordinates."""

    def adapter_resolve_coordinates(self, locality: str, trace_scope: TraceScope) -> GeoCoordinate:
        """Resolve one locality name to its first matching coordinate.

        Args:
            locality: Non-empty locality name.
            trace_scope: Scope for the lookup span.

        Returns:
            GeoCoordinate: First match coordinates.

        Raises:
            LookupError: Raised when lookup fails or yields no match.
        """


class WeatherPort(Protocol):
    """Port definition for fetching current temperature at coordinates."""

    def adapter_fetch_temperature(self, coordinate: GeoCoordinate, trace_scope: TraceScope) -> TemperatureReading:
        """Fetch current Celsius temperature at one coordinate.

        Args:
            coordinate: Target coordinate.
            trace_scope: Scope for the lookup span.

        Returns:
            TemperatureReading: Current temperature.

        Raises:
            LookupError: Raised when the weather lookup fails.
        """


class ResolverRelayPort(Protocol):
    """Port definition for forwarding gateway requests to the resolver service."""

    def adapter_forward(self, raw_body: bytes, trace_scope: TraceScope) -> RelayedResponse:
        """Forward a raw request body and capture the resolver response.

        Args:
            raw_body: Original inbound body bytes.
            trace_scope: Scope whose context is propagated to the resolver.

        Returns:
            RelayedResponse: Resolver status, body and content type.

        Raises:
            LookupError: Raised when the resolver cannot be reached.
        """
