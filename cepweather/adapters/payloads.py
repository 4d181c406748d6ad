"""Pydantic decoders for upstream provider payloads."""

from pydantic import BaseModel, ConfigDict, TypeAdapter


class ViaCepPayload(BaseModel):
    """ViaCEP lookup payload; `erro` arrives as boolean or `"true"` string."""

    model_config = ConfigDict(extra="ignore")

    erro: bool = False
    localidade: str = ""


class NominatimPlace(BaseModel):
    """One Nominatim search match; coordinates arrive as numeric strings."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    lat: float
    lon: float


class OpenMeteoCurrentWeather(BaseModel):
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    temperature: float


class OpenMeteoPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    current_weather: OpenMeteoCurrentWeather


NOMINATIM_RESULTS_ADAPTER = TypeAdapter(list[NominatimPlace])
