"""FastAPI application factories for the gateway and resolver services."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Callable, Iterable

from fastapi import FastAPI
from opentelemetry import trace

from cepweather.adapters import ResolverRelayPort
from cepweather.config import GatewaySettings, ResolverSettings
from cepweather.pipeline import TemperaturePipelinePort

from .routers import api_create_gateway_router, api_create_health_router, api_create_resolver_router

ShutdownHook = Callable[[], object]


def _api_build_lifespan(shutdown_hooks: Iterable[ShutdownHook]):
    """Return a lifespan handler that runs shutdown hooks in order."""
    hooks = tuple(shutdown_hooks)

    @asynccontextmanager
    async def _lifespan(_application: FastAPI):
        yield
        for hook in hooks:
            hook()

    return _lifespan


def create_gateway_application(
    settings: GatewaySettings,
    relay_adapter: ResolverRelayPort,
    tracer: trace.Tracer,
    shutdown_hooks: Iterable[ShutdownHook] = (),
) -> FastAPI:
    """Create the front gateway FastAPI application.

    Args:
        settings: Validated gateway settings.
        relay_adapter: Adapter forwarding requests to the resolver.
        tracer: Tracer for request spans.
        shutdown_hooks: Callables run on application shutdown, such as span flushing.

    Returns:
        FastAPI: Gateway application.

    Raises:
        ValueError: Raised when router dependencies are invalid.
    """

    application = FastAPI(title="CEP Weather Gateway", lifespan=_api_build_lifespan(shutdown_hooks))
    application.include_router(api_create_health_router(settings.otel_service_name, settings.environment_name))
    application.include_router(api_create_gateway_router(relay_adapter=relay_adapter, tracer=tracer))
    return application


def create_resolver_application(
    settings: ResolverSettings,
    pipeline: TemperaturePipelinePort,
    tracer: trace.Tracer,
    shutdown_hooks: Iterable[ShutdownHook] = (),
) -> FastAPI:
    """Create the resolver FastAPI application.

    Args:
        settings: Validated resolver settings.
        pipeline: Temperature resolution pipeline.
        tracer: Tracer for request spans.
        shutdown_hooks: Callables run on application shutdown, such as span flushing.

    Returns:
        FastAPI: Resolver application.

    Raises:
        ValueError: Raised when router dependencies are invalid.
    """

    application = FastAPI(title="CEP Weather Resolver", lifespan=_api_build_lifespan(shutdown_hooks))
    application.include_router(api_create_health_router(settings.otel_service_name, settings.environment_name))
    application.include_router(api_create_resolver_router(pipeline=pipeline, tracer=tracer))
    return application
