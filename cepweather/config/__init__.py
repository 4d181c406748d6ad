"""Configuration package for runtime settings and startup validation."""

from .settings import (
    GatewaySettings,
    ResolverSettings,
    SettingsLoadError,
    config_load_gateway_settings,
    config_load_resolver_settings,
)

__all__ = [
    "GatewaySettings",
    "ResolverSettings",
    "SettingsLoadError",
    "config_load_gateway_settings",
    "config_load_resolver_settings",
]
