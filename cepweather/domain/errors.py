"""Project-native typed exceptions for inbound request failures."""

from __future__ import annotations


class CepWeatherError(Exception):
    """Base exception for CEP weather service failures."""


class InputValidationError(CepWeatherError, ValueError):
    """Malformed or absent client input.

    Attributes:
        status_code: HTTP status reported to the caller.
        public_message: Plain-text message safe to return to the caller.
    """

    status_code: int = 400
    public_message: str = "invalid request format"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.public_message)


class RequestFormatError(InputValidationError):
    """Request body could not be decoded as `{"cep": string}`."""

    status_code = 400
    public_message = "invalid request format"


class PostalCodeValidationError(InputValidationError):
    """Postal code is not exactly eight ASCII digits."""

    status_code = 422
    public_message = "invalid zipcode"
