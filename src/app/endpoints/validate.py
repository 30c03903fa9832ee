"""Handler for REST API call to validate token and account for quota usage."""

from typing import Annotated, Any, Optional

from fastapi import APIRouter, Header, HTTPException, status

import constants
from app.state import app_state
from log import get_logger
from models.responses import (
    AuthorizationResponse,
    BadRequestResponse,
    InternalServerErrorResponse,
    QuotaExceededResponse,
    UnauthorizedResponse,
)
from quota.quota_authorizer import Verdict
from store.store_error import StoreError

logger = get_logger("app.endpoints.handlers")
router = APIRouter(tags=["validate"])


validate_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Token is valid and quota is available",
        "model": AuthorizationResponse,
    },
    400: {
        "description": "Authorization header is missing",
        "model": BadRequestResponse,
    },
    401: {
        "description": "Token is not valid",
        "model": UnauthorizedResponse,
    },
    429: {
        "description": "Quota for current month has been exceeded",
        "model": QuotaExceededResponse,
    },
    500: {
        "description": "Quota usage can not be updated",
        "model": InternalServerErrorResponse,
    },
}


def extract_token(authorization: Optional[str]) -> str:
    """Retrieve token from Authorization header value, Bearer prefix is optional."""
    if authorization is None:
        return constants.NO_TOKEN
    token = authorization.lstrip()
    if token.startswith(constants.BEARER_PREFIX):
        token = token[len(constants.BEARER_PREFIX) :]
    return token.strip()


@router.get("/validate", responses=validate_responses)
def validate_endpoint_handler(
    authorization: Annotated[Optional[str], Header()] = None,
) -> AuthorizationResponse:
    """
    Handle request to the /validate endpoint.

    Token is read from the Authorization header. When the token is valid and
    its quota is not exhausted, the quota usage is incremented.

    Returns:
        AuthorizationResponse: Indicates that the request is authorized.

    Raises:
        HTTPException: 400 when header is missing, 401 for unknown token, 429
        when quota has been exceeded, 500 when usage can not be updated.
    """
    token = extract_token(authorization)
    if not token:
        logger.warning("Authorization header is missing")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=BadRequestResponse().dump_detail(),
        )

    try:
        verdict = app_state.quota_authorizer.authorize(token)
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=InternalServerErrorResponse(
                response="Failed to update quota usage", cause=str(e)
            ).dump_detail(),
        ) from e

    match verdict:
        case Verdict.AUTHORIZED:
            return AuthorizationResponse(authorized=True)
        case Verdict.QUOTA_EXCEEDED:
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=QuotaExceededResponse().dump_detail(),
            )
        case _:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=UnauthorizedResponse().dump_detail(),
            )
