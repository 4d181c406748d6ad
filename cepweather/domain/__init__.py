"""Domain models and pure helpers shared across service layers."""

from .conversion import domain_build_temperature_report
from .errors import CepWeatherError, InputValidationError, PostalCodeValidationError, RequestFormatError
from .models import (
    CityRecord,
    GeoCoordinate,
    HealthStatus,
    PostalCodeRequest,
    TemperatureReading,
    TemperatureReport,
)
from .validation import (
    domain_parse_postal_code_request,
    domain_require_valid_postal_code,
    domain_validate_postal_code,
)

__all__ = [
    "CepWeatherError",
    "CityRecord",
    "GeoCoordinate",
    "HealthStatus",
    "InputValidationError",
    "PostalCodeRequest",
    "PostalCodeValidationError",
    "RequestFormatError",
    "TemperatureReading",
    "TemperatureReport",
    "domain_build_temperature_report",
    "domain_parse_postal_code_request",
    "domain_require_valid_postal_code",
    "domain_validate_postal_code",
]
