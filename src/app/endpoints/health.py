"""Handlers for health REST API endpoints.

These endpoints are used to check if service is live and prepared to accept
requests. Readiness means that credential store can be reached.
"""

from typing import Any

from fastapi import APIRouter, Response, status

from app.state import app_state
from log import get_logger
from models.responses import LivenessResponse, ReadinessResponse

logger = get_logger("app.endpoints.handlers")
router = APIRouter(tags=["health"])


get_readiness_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Service is ready",
        "model": ReadinessResponse,
    },
    503: {
        "description": "Service is not ready",
        "model": ReadinessResponse,
    },
}


@router.get("/readiness", responses=get_readiness_responses)
@router.get("/ready", responses=get_readiness_responses)
def readiness_probe_get_method(response: Response) -> ReadinessResponse:
    """
    Readiness probe that checks whether credential store is reachable.

    Returns 200 when the store responds, 503 otherwise.
    """
    logger.info("Response to readiness endpoint")

    ready, reason = app_state.check_health()
    if not ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(ready=ready, reason=reason)


get_liveness_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Service is alive",
        "model": LivenessResponse,
    },
    # HTTP_503_SERVICE_UNAVAILABLE will never be returned when unreachable
}


@router.get("/liveness", responses=get_liveness_responses)
@router.get("/status", responses=get_liveness_responses)
def liveness_probe_get_method() -> LivenessResponse:
    """
    Return the liveness status of the service.

    Returns:
        LivenessResponse: Indicates that the service is alive.
    """
    logger.info("Response to liveness endpoint")

    return LivenessResponse(alive=True)
