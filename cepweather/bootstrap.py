"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from cepweather.adapters import (
    NominatimGeocodingAdapter,
    OpenMeteoWeatherAdapter,
    ResolverForwardingAdapter,
    ViaCepLocalityAdapter,
)
from cepweather.api import create_gateway_application, create_resolver_application
from cepweather.config import config_load_gateway_settings, config_load_resolver_settings
from cepweather.pipeline import TemperatureResolutionPipeline
from cepweather.telemetry import telemetry_configure_logging, telemetry_create_tracer_provider

TRACER_NAME = "cepweather"


def bootstrap_create_gateway_application() -> FastAPI:
    """Assemble the gateway application after validating startup configuration.

    Returns:
        FastAPI: Fully initialized gateway application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
        TelemetrySetupError: Raised when the tracing pipeline cannot be initialized.
    """

    settings = config_load_gateway_settings()
    telemetry_configure_logging(settings.log_level)
    tracer_provider = telemetry_create_tracer_provider(
        service_name=settings.otel_service_name,
        environment_name=settings.environment_name,
        otlp_endpoint=settings.otel_exporter_otlp_endpoint,
        console_exporter_enabled=settings.otel_console_exporter_enabled,
    )
    relay_adapter = ResolverForwardingAdapter(base_url=settings.resolver_base_url)
    return create_gateway_application(
        settings=settings,
        relay_adapter=relay_adapter,
        tracer=tracer_provider.get_tracer(TRACER_NAME),
        shutdown_hooks=(tracer_provider.shutdown,),
    )


def bootstrap_create_resolver_application() -> FastAPI:
    """Assemble the resolver application after validating startup configuration.

    Returns:
        FastAPI: Fully initialized resolver application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
        TelemetrySetupError: Raised when the tracing pipeline cannot be initialized.
    """

    settings = config_load_resolver_settings()
    telemetry_configure_logging(settings.log_level)
    tracer_provider = telemetry_create_tracer_provider(
        service_name=settings.otel_service_name,
        environment_name=settings.environment_name,
        otlp_endpoint=settings.otel_exporter_otlp_endpoint,
        console_exporter_enabled=settings.otel_console_exporter_enabled,
    )
    pipeline = TemperatureResolutionPipeline(
        locality_adapter=ViaCepLocalityAdapter(base_url=settings.viacep_base_url),
        geocoding_adapter=NominatimGeocodingAdapter(
            base_url=settings.nominatim_base_url,
            user_agent=settings.nominatim_user_agent,
        ),
        weather_adapter=OpenMeteoWeatherAdapter(base_url=settings.open_meteo_base_url),
    )
    return create_resolver_application(
        settings=settings,
        pipeline=pipeline,
        tracer=tracer_provider.get_tracer(TRACER_NAME),
        shutdown_hooks=(tracer_provider.shutdown,),
    )
