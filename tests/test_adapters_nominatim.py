"""Tests for Nominatim geocoding adapter results and error mapping."""

from __future__ import annotations

import httpx
import pytest

from cepweather.adapters import LocationNotFoundError, NominatimGeocodingAdapter, UpstreamError
from cepweather.domain import GeoCoordinate


def test_adapters_nominatim_returns_first_match(mock_client_factory, root_scope, span_exporter) -> None:
    """Encode the locality, send the configured user agent and take the first match.

    Returns:
        None: Assertions validate request shape and coordinate decoding.

    Raises:
        AssertionError: Raised when request or result is incorrect.
    """

    captured_requests: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(request)
        return httpx.Response(
            200,
            json=[
                {"lat": "-7.1215981", "lon": "-34.882028", "display_name": "João Pessoa, Paraíba"},
                {"lat": "-23.5", "lon": "-46.6", "display_name": "Other"},
            ],
        )

    adapter = NominatimGeocodingAdapter(
        base_url="https://nominatim.test",
        user_agent="cepweather-tests/1.0",
        client_factory=mock_client_factory(_handler),
    )

    coordinate = adapter.adapter_resolve_coordinates("João Pessoa", root_scope)

    assert coordinate == GeoCoordinate(latitude=-7.1215981, longitude=-34.882028)
    request = captured_requests[0]
    assert request.url.path == "/search"
    assert request.url.params["format"] == "json"
    assert request.url.params["q"] == "João Pessoa"
    assert request.headers["user-agent"] == "cepweather-tests/1.0"
    assert [span.attributes["peer.service"] for span in span_exporter.get_finished_spans()] == ["nominatim"]


def test_adapters_nominatim_empty_result_raises_not_found(mock_client_factory, root_scope) -> None:
    adapter = NominatimGeocodingAdapter(client_factory=mock_client_factory(lambda _request: httpx.Response(200, json=[])))

    with pytest.raises(LocationNotFoundError) as error_info:
        adapter.adapter_resolve_coordinates("Nowhere", root_scope)

    assert isinstance(error_info.value, LookupError)


def test_adapters_nominatim_non_success_status_carries_diagnostics(mock_client_factory, root_scope) -> None:
    """Raise UpstreamError with status and raw body for non-200 responses.

    Returns:
        None: Assertions validate diagnostic attributes.

    Raises:
        AssertionError: Raised when diagnostics are missing.
    """

    adapter = NominatimGeocodingAdapter(
        client_factory=mock_client_factory(lambda _request: httpx.Response(403, text="blocked user agent")),
    )

    with pytest.raises(UpstreamError) as error_info:
        adapter.adapter_resolve_coordinates("Recife", root_scope)

    assert error_info.value.status_code == 403
    assert error_info.value.response_body == "blocked user agent"


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, content=b"not json"),
        httpx.Response(200, json=[{"lat": "north", "lon": "-34.8"}]),
        httpx.Response(200, json={"lat": "-7.1", "lon": "-34.8"}),
        httpx.Response(200, json=[{"lat": "nan", "lon": "-34.8"}]),
        httpx.Response(200, json=[{"lat": "-7.1", "lon": "inf"}]),
    ],
)
def test_adapters_nominatim_decode_failure_raises_upstream_error(mock_client_factory, root_scope, response) -> None:
    adapter = NominatimGeocodingAdapter(client_factory=mock_client_factory(lambda _request: response))

    with pytest.raises(UpstreamError):
        adapter.adapter_resolve_coordinates("Recife", root_scope)


def test_adapters_nominatim_transport_error_raises_upstream_error(mock_client_factory, root_scope) -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    adapter = NominatimGeocodingAdapter(client_factory=mock_client_factory(_handler))

    with pytest.raises(UpstreamError, match="transport"):
        adapter.adapter_resolve_coordinates("Recife", root_scope)


def test_adapters_nominatim_rejects_blank_locality(root_scope) -> None:
    adapter = NominatimGeocodingAdapter()

    with pytest.raises(ValueError, match="locality"):
        adapter.adapter_resolve_coordinates("  ", root_scope)
