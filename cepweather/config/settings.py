"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVEL_NAMES = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class _ServiceSettings(BaseSettings):
    """Settings shared by the gateway and resolver services.

    Environment variable names map directly to field names in uppercase.
    Example: `otel_exporter_otlp_endpoint` reads from `OTEL_EXPORTER_OTLP_ENDPOINT`.

    Attributes:
        environment_name: Runtime environment label.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Root logging level name.
        otel_service_name: `service.name` resource attribute for exported spans.
        otel_exporter_otlp_endpoint: Optional OTLP/HTTP collector base URL.
        otel_console_exporter_enabled: Whether spans are also pretty-printed to stdout.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    application_host: str = Field(default="0.0.0.0")
    application_port: int = Field(default=8080, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    otel_service_name: str = Field(default="cepweather", min_length=1)
    otel_exporter_otlp_endpoint: str | None = Field(default=None)
    otel_console_exporter_enabled: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in _LOG_LEVEL_NAMES:
            raise ValueError(f"unsupported log level: {value}")
        return normalized_value

    @field_validator("otel_exporter_otlp_endpoint")
    @classmethod
    def _validate_optional_endpoint(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped_value = value.strip()
        return stripped_value or None


def _settings_normalize_url(value: str) -> str:
    stripped_value = value.strip()
    if not stripped_value:
        raise ValueError("value must not be blank")
    return stripped_value.rstrip("/")


class GatewaySettings(_ServiceSettings):
    """Front gateway settings.

    Attributes:
        resolver_base_url: Base URL of the resolver service.
    """

    application_port: int = Field(default=8080, ge=1, le=65535)
    otel_service_name: str = Field(default="cepweather-gateway", min_length=1)
    resolver_base_url: str = Field(default="http://resolver:8081")

    @field_validator("resolver_base_url")
    @classmethod
    def _validate_url(cls, value: str) -> str:
        return _settings_normalize_url(value)


class ResolverSettings(_ServiceSettings):
    """Resolver service settings.

    Attributes:
        viacep_base_url: ViaCEP web service base URL.
        nominatim_base_url: Nominatim geocoding base URL.
        nominatim_user_agent: `User-Agent` sent to Nominatim, which rejects anonymous clients.
        open_meteo_base_url: Open-Meteo API base URL.
    """

    application_port: int = Field(default=8081, ge=1, le=65535)
    otel_service_name: str = Field(default="cepweather-resolver", min_length=1)
    viacep_base_url: str = Field(default="https://viacep.com.br/ws")
    nominatim_base_url: str = Field(default="https://nominatim.openstreetmap.org")
    nominatim_user_agent: str = Field(default="cepweather/1.0 (Python/httpx)", min_length=1)
    open_meteo_base_url: str = Field(default="https://api.open-meteo.com/v1")

    @field_validator("viacep_base_url", "nominatim_base_url", "open_meteo_base_url")
    @classmethod
    def _validate_url(cls, value: str) -> str:
        return _settings_normalize_url(value)

    @field_validator("nominatim_user_agent")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value


def config_load_gateway_settings() -> GatewaySettings:
    """Load and validate gateway settings from environment and dotenv.

    Returns:
        GatewaySettings: Validated gateway settings object.

    Raises:
        SettingsLoadError: Raised when settings are missing or invalid.
    """

    try:
        return GatewaySettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Gateway configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_load_resolver_settings() -> ResolverSettings:
    """Load and validate resolver settings from environment and dotenv.

    Returns:
        ResolverSettings: Validated resolver settings object.

    Raises:
        SettingsLoadError: Raised when settings are missing or invalid.
    """

    try:
        return ResolverSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Resolver configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
