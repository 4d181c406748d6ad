"""API router package for endpoint composition."""

from .gateway import api_create_gateway_router
from .health import api_create_health_router
from .resolver import api_create_resolver_router

__all__ = ["api_create_gateway_router", "api_create_health_router", "api_create_resolver_router"]
