"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from src.user_registry.api.http.app_data import ApplicationDependencies
from src.user_registry.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Basic health check endpoint - checks if app is running.

    This is a liveness probe that returns 200 OK as long as the application
    process is running. It does not check dependencies.
    """
    return {"status": "healthy", "service": "api"}


@router.get("/ready", response_model=None)
def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness check - returns 503 when the user store is unavailable."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    backend = get_config().store.backend

    store_healthy = app_deps.user_store.health_check()
    body = {
        "status": "ready" if store_healthy else "not_ready",
        "checks": {
            "store": {
                "status": "healthy" if store_healthy else "unhealthy",
                "type": backend,
            }
        },
    }

    if not store_healthy:
        return JSONResponse(status_code=503, content=body)
    return body
