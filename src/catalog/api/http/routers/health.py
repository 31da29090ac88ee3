"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from src.catalog.api.http.deps import get_connection_factory
from src.catalog.core.services.database import SqlConnectionFactory
from src.catalog.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe: 200 as long as the process is running."""
    return {"status": "healthy", "service": "product-catalog"}


@router.get("/ready", response_model=None)
async def readiness(
    connection_factory: SqlConnectionFactory = Depends(get_connection_factory),
) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 503 when the database is unreachable."""
    config = get_config()
    db_healthy = await connection_factory.health_check()

    response = {
        "status": "ready" if db_healthy else "not_ready",
        "environment": config.app.environment,
        "checks": {
            "database": {
                "status": "healthy" if db_healthy else "unhealthy",
                "pool": connection_factory.get_pool_status(),
            }
        },
    }

    if not db_healthy:
        return JSONResponse(status_code=503, content=response)
    return response
