"""Tests for runtime settings loading and normalization."""

from __future__ import annotations

import pytest

from cepweather.config import SettingsLoadError, config_load_gateway_settings, config_load_resolver_settings


def test_config_gateway_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RESOLVER_BASE_URL", raising=False)
    monkeypatch.delenv("APPLICATION_PORT", raising=False)

    settings = config_load_gateway_settings()

    assert settings.resolver_base_url == "http://resolver:8081"
    assert settings.application_port == 8080
    assert settings.otel_exporter_otlp_endpoint is None


def test_config_resolver_settings_normalizes_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip trailing slashes, upper-case log levels and blank endpoints to None.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate normalization.

    Raises:
        AssertionError: Raised when normalization is incorrect.
    """

    monkeypatch.setenv("VIACEP_BASE_URL", " https://viacep.example/ws/ ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("OTEL_EXPORTER_OTLP_ENDPOINT", "  ")
    monkeypatch.setenv("APPLICATION_PORT", "9091")

    settings = config_load_resolver_settings()

    assert settings.viacep_base_url == "https://viacep.example/ws"
    assert settings.log_level == "DEBUG"
    assert settings.otel_exporter_otlp_endpoint is None
    assert settings.application_port == 9091


@pytest.mark.parametrize(
    ("variable", "value"),
    [("RESOLVER_BASE_URL", "   "), ("LOG_LEVEL", "chatty"), ("APPLICATION_PORT", "70000")],
)
def test_config_gateway_settings_invalid_values_raise(monkeypatch: pytest.MonkeyPatch, variable: str, value: str) -> None:
    monkeypatch.setenv(variable, value)

    with pytest.raises(SettingsLoadError, match="Gateway configuration validation failed"):
        config_load_gateway_settings()
