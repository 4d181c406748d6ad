"""API layer package for FastAPI application and route composition."""

from .application import create_gateway_application, create_resolver_application

__all__ = ["create_gateway_application", "create_resolver_application"]
