"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the selected service.
"""

import argparse

import uvicorn

from cepweather.bootstrap import bootstrap_create_gateway_application, bootstrap_create_resolver_application
from cepweather.config import config_load_gateway_settings, config_load_resolver_settings


def main() -> None:
    """Run the selected service with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        TelemetrySetupError: Raised when tracing cannot be initialized.
    """

    argument_parser = argparse.ArgumentParser(description="CEP weather service runtime entrypoint")
    argument_parser.add_argument(
        "command",
        choices=("gateway", "resolver"),
        help="Service to run: `gateway` validates and relays, `resolver` performs the lookup chain",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args()

    if parsed_arguments.command == "gateway":
        settings = config_load_gateway_settings()
        application = bootstrap_create_gateway_application()
    else:
        settings = config_load_resolver_settings()
        application = bootstrap_create_resolver_application()

    print(f"{settings.otel_service_name} listening on {settings.application_host}:{settings.application_port}")
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
