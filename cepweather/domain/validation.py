"""Postal code validation gate and inbound request decoding."""

from __future__ import annotations

from pydantic import ValidationError

from .errors import PostalCodeValidationError, RequestFormatError
from .models import PostalCodeRequest

POSTAL_CODE_LENGTH = 8


def domain_validate_postal_code(code: str) -> bool:
    """Return whether a token is exactly eight ASCII decimal digits.

    Args:
        code: Candidate postal code, not trimmed or normalized.

    Returns:
        bool: True when the token is a well-formed postal code.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if len(code) != POSTAL_CODE_LENGTH:
        return False
    return all("0" <= character <= "9" for character in code)


def domain_require_valid_postal_code(code: str) -> str:
    """Return the postal code unchanged or raise when it is malformed.

    Args:
        code: Candidate postal code.

    Returns:
        str: The same postal code token.

    Raises:
        PostalCodeValidationError: Raised when the token is not eight ASCII digits.
    """

    if not domain_validate_postal_code(code):
        raise PostalCodeValidationError()
    return code


def domain_parse_postal_code_request(raw_body: bytes) -> str:
    """Decode a raw `{"cep": string}` request body into its postal code token.

    A `null` body or a missing or null `cep` decodes to the empty string so that
    it is rejected by validation rather than by decoding. The key matches
    case-insensitively.

    Args:
        raw_body: Raw request body bytes.

    Returns:
        str: Undecorated postal code token.

    Raises:
        RequestFormatError: Raised when the body is not a JSON object with a string `cep`.
    """

    try:
        request = PostalCodeRequest.model_validate_json(raw_body)
    except ValidationError as error:
        raise RequestFormatError() from error
    return request.cep or ""
