"""
FastAPI router for health check endpoints.

`/` is the liveness check clients already rely on; `/health/ready` also
verifies that MongoDB answers.
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from backend.postboard.api.dependencies import get_store
from backend.postboard.api.schemas import HealthResponse
from backend.postboard.core.data.store import PostStore
from backend.postboard.core.exceptions import StoreError

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["health"],
    responses={
        200: {"description": "Service is healthy"},
    },
)


@router.get(
    "/",
    response_model=HealthResponse,
    response_model_exclude_none=True,
    summary="Basic health check",
)
def health_check() -> HealthResponse:
    """
    Basic health check.

    Always returns 200 if the process is serving requests.

    Example:
        GET /

        Response:
        {"status": "ok", "time": "2026-10-19T10:30:00.123456Z"}
    """
    return HealthResponse(status="ok")


@router.get(
    "/health/ready",
    response_model=HealthResponse,
    summary="Readiness check",
    responses={503: {"model": HealthResponse, "description": "Database unreachable"}},
)
def readiness_check(
    response: Response,
    store: PostStore = Depends(get_store),
) -> HealthResponse:
    """
    Readiness check for MongoDB connectivity.

    Returns 200 if the database answers a ping, 503 otherwise.
    """
    try:
        store.ping()
    except StoreError as e:
        logger.warning(f"Readiness check failed: {e}")
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="error", details={"database": f"error: {e.original_error or e}"})

    return HealthResponse(status="ok", details={"database": "connected"})
