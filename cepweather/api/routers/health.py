"""Health endpoint router composition."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from cepweather.domain import HealthStatus


def api_create_health_router(service_name: str, environment_name: str) -> APIRouter:
    """Create health-check router reporting process liveness.

    Args:
        service_name: Service label reported in the payload.
        environment_name: Runtime environment label.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when service_name is blank.
    """

    if not service_name.strip():
        raise ValueError("service_name must not be blank")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return service health state.

        Returns:
            JSONResponse: Deterministic health payload for operational checks.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        health = HealthStatus(status="ok", detail="service ready")
        payload = {
            "status": health.status,
            "detail": health.detail,
            "service": service_name,
            "environment": environment_name,
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
