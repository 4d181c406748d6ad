"""Typed domain models shared across runtime layers.

Dataclasses here are immutable value contracts passed between adapters, the
resolution pipeline and the HTTP surfaces. `PostalCodeRequest` is the only
pydantic model because it decodes untrusted inbound JSON.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class PostalCodeRequest(BaseModel):
    """Inbound request body contract for both services.

    Attributes:
        cep: Raw postal code token, `None` when absent or null.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    cep: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _fold_cep_key(cls, data: Any) -> Any:
        """Match the `cep` key case-insensitively and treat a `null` body as empty.

        Later spellings overwrite earlier ones; null values leave the field unchanged.
        """

        if data is None:
            return {}
        if not isinstance(data, dict):
            return data

        folded: dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(key, str) and key.lower() == "cep" and value is not None:
                folded["cep"] = value
        return folded


@dataclass(frozen=True)
class CityRecord:
    """Result of postal-code to locality resolution.

    Attributes:
        locality: Locality (city) name; meaningless when `not_found` is set.
        not_found: Whether resolution failed for any reason.
    """

    locality: str
    not_found: bool = False

    @classmethod
    def city_not_found(cls) -> "CityRecord":
        """Build the sentinel record for unresolvable postal codes.

        Returns:
            CityRecord: Record with the not-found flag set.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return cls(locality="", not_found=True)


@dataclass(frozen=True)
class GeoCoordinate:
    """Geographic coordinate pair in decimal degrees.

    Attributes:
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.
    """

    latitude: float
    longitude: float


@dataclass(frozen=True)
class TemperatureReading:
    """Current temperature reported by the weather provider.

    Attributes:
        celsius: Temperature in degrees Celsius.
    """

    celsius: float


@dataclass(frozen=True)
class TemperatureReport:
    """Temperature for one city expressed in three units.

    Attributes:
        city: Resolved locality name.
        temp_c: Degrees Celsius.
        temp_f: Degrees Fahrenheit.
        temp_k: Kelvin.
    """

    city: str
    temp_c: float
    temp_f: float
    temp_k: float

    def report_as_payload(self) -> dict[str, object]:
        """Return the wire representation of the report.

        Returns:
            dict[str, object]: JSON-ready payload with `temp_C`/`temp_F`/`temp_K` keys.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return {
            "city": self.city,
            "temp_C": self.temp_c,
            "temp_F": self.temp_f,
            "temp_K": self.temp_k,
        }


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str
