"""Tests for postal code validation and inbound request decoding."""

from __future__ import annotations

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cepweather.domain import (
    PostalCodeValidationError,
    RequestFormatError,
    domain_parse_postal_code_request,
    domain_require_valid_postal_code,
    domain_validate_postal_code,
)

_ASCII_DIGITS = frozenset(string.digits)


@given(st.text(max_size=12))
def test_domain_validate_matches_length_and_ascii_digit_rule(candidate: str) -> None:
    """Accept exactly the eight-character all-ASCII-digit strings.

    Args:
        candidate: Random text generated by hypothesis.

    Returns:
        None: Assertions validate the validation rule.

    Raises:
        AssertionError: Raised when validation disagrees with the rule.
    """

    expected = len(candidate) == 8 and all(character in _ASCII_DIGITS for character in candidate)
    assert domain_validate_postal_code(candidate) is expected


@given(st.text(alphabet=string.digits, min_size=8, max_size=8))
def test_domain_validate_accepts_every_eight_digit_string(candidate: str) -> None:
    assert domain_validate_postal_code(candidate) is True


@pytest.mark.parametrize(
    "candidate",
    [
        "",
        "123",
        "5804504",
        "580450401",
        "58045-040",
        " 58045040",
        "58045040 ",
        "5804504a",
        "٥٨٠٤٥٠٤٠",
        "５８０４５０４０",
    ],
)
def test_domain_validate_rejects_malformed_postal_codes(candidate: str) -> None:
    """Reject short, long, hyphenated, padded and non-ASCII-digit tokens.

    Args:
        candidate: Malformed postal code.

    Returns:
        None: Assertions validate rejection.

    Raises:
        AssertionError: Raised when a malformed token is accepted.
    """

    assert domain_validate_postal_code(candidate) is False


def test_domain_require_valid_postal_code_raises_unprocessable() -> None:
    with pytest.raises(PostalCodeValidationError) as error_info:
        domain_require_valid_postal_code("123")

    assert error_info.value.status_code == 422
    assert error_info.value.public_message == "invalid zipcode"
    assert domain_require_valid_postal_code("58045040") == "58045040"


@pytest.mark.parametrize(
    ("raw_body", "expected"),
    [
        (b'{"cep": "58045040"}', "58045040"),
        (b'{"cep": "123"}', "123"),
        (b'{"cep": "58045040", "extra": true}', "58045040"),
        (b"{}", ""),
        (b'{"cep": null}', ""),
        (b"null", ""),
        (b'{"CEP": "58045040"}', "58045040"),
        (b'{"Cep": "11111111", "cep": "58045040"}', "58045040"),
        (b'{"cep": "58045040", "CEP": null}', "58045040"),
    ],
)
def test_domain_parse_postal_code_request_extracts_token(raw_body: bytes, expected: str) -> None:
    assert domain_parse_postal_code_request(raw_body) == expected


@pytest.mark.parametrize(
    "raw_body",
    [b"", b"not json", b'{"cep": 58045040}', b"[]", b'"58045040"', b'{"cep": "5804', b"\xff\xfe"],
)
def test_domain_parse_postal_code_request_rejects_malformed_body(raw_body: bytes) -> None:
    """Raise request-format error for bodies that are not `{"cep": string}`.

    Args:
        raw_body: Malformed body bytes.

    Returns:
        None: Assertions validate error mapping.

    Raises:
        AssertionError: Raised when malformed body is accepted.
    """

    with pytest.raises(RequestFormatError) as error_info:
        domain_parse_postal_code_request(raw_body)

    assert error_info.value.status_code == 400
    assert error_info.value.public_message == "invalid request format"
