"""Project-native typed exceptions for upstream lookup failures."""

from __future__ import annotations


class AdapterLookupError(LookupError):
    """Base exception for adapter-level upstream lookup failures.

    Attributes:
        status_code: Upstream HTTP status when a response was received.
        response_body: Raw upstream response body for diagnostics only.
    """

    def __init__(self, message: str, status_code: int | None = None, response_body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class UpstreamError(AdapterLookupError):
    """Transport failure, non-success status, or undecodable upstream response."""


class LocationNotFoundError(AdapterLookupError):
    """Upstream answered successfully but has no location for the query."""
