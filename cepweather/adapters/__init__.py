"""Adapter layer package for upstream HTTP integration boundaries."""

from .http_transport import HttpClientFactory, adapter_default_client_factory, adapter_traced_request
from .interfaces import (
	GeocodingPort,
	LocalityLookupPort,
	RelayedResponse,
	ResolverRelayPort,
	WeatherPort,
)
from .lookup_errors import AdapterLookupError, LocationNotFoundError, UpstreamError
from .nominatim import NominatimGeocodingAdapter
from .open_meteo import OpenMeteoWeatherAdapter
from .resolver_forwarding import ResolverForwardingAdapter
from .viacep import ViaCepLocalityAdapter

__all__ = [
	"AdapterLookupError",
	"GeocodingPort",
	"HttpClientFactory",
	"LocalityLookupPort",
	"LocationNotFoundError",
	"NominatimGeocodingAdapter",
	"OpenMeteoWeatherAdapter",
	"RelayedResponse",
	"ResolverForwardingAdapter",
	"ResolverRelayPort",
	"UpstreamError",
	"ViaCepLocalityAdapter",
	"WeatherPort",
	"adapter_default_client_factory",
	"adapter_traced_request",
]
