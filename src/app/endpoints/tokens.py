"""Handlers for credential management REST API endpoints."""

from typing import Any

from fastapi import APIRouter, HTTPException, status

from app.state import app_state
from log import get_logger
from models.requests import CredentialRequest
from models.responses import (
    ConflictResponse,
    CreatedCredentialResponse,
    CredentialResponse,
    DeleteCredentialResponse,
    InternalServerErrorResponse,
    NotFoundResponse,
    ServiceUnavailableResponse,
)
from store.store_error import (
    DuplicateAccountError,
    StoreError,
    StoreUnavailableError,
)

logger = get_logger("app.endpoints.handlers")
router = APIRouter(tags=["tokens"])


store_error_responses: dict[int | str, dict[str, Any]] = {
    500: {
        "description": "Credential store failure",
        "model": InternalServerErrorResponse,
    },
    503: {
        "description": "Credential store is not reachable",
        "model": ServiceUnavailableResponse,
    },
}


def store_error_to_http_exception(e: StoreError, operation: str) -> HTTPException:
    """Map credential store error to HTTP exception."""
    if isinstance(e, StoreUnavailableError):
        logger.error("Credential store is not reachable: %s", e)
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=ServiceUnavailableResponse(cause=str(e)).dump_detail(),
        )
    logger.error("Failed to %s: %s", operation, e)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=InternalServerErrorResponse(
            response=f"Failed to {operation}", cause=str(e)
        ).dump_detail(),
    )


list_tokens_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "List of all credentials",
        "model": list[CredentialResponse],
    },
    **store_error_responses,
}


@router.get("/tokens", responses=list_tokens_responses)
def list_tokens_endpoint_handler() -> list[CredentialResponse]:
    """Handle request to retrieve all credentials."""
    logger.info("Retrieving all credentials")
    try:
        credentials = app_state.credential_manager.list_all()
    except StoreError as e:
        raise store_error_to_http_exception(e, "get tokens") from e
    return [CredentialResponse.from_credential(c) for c in credentials]


get_token_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Credential for given account",
        "model": CredentialResponse,
    },
    404: {
        "description": "Credential not found",
        "model": NotFoundResponse,
    },
    **store_error_responses,
}


@router.get("/tokens/{account_id}", responses=get_token_responses)
def get_token_endpoint_handler(account_id: str) -> CredentialResponse:
    """Handle request to retrieve credential for given account."""
    logger.info("Retrieving credential for account '%s'", account_id)
    try:
        credential = app_state.credential_manager.get(account_id)
    except StoreError as e:
        raise store_error_to_http_exception(e, "get token") from e

    if credential is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NotFoundResponse(
                resource="credential", resource_id=account_id
            ).dump_detail(),
        )
    return CredentialResponse.from_credential(credential)


create_token_responses: dict[int | str, dict[str, Any]] = {
    201: {
        "description": "Credential created, token is returned only once",
        "model": CreatedCredentialResponse,
    },
    409: {
        "description": "Account already has a credential",
        "model": ConflictResponse,
    },
    **store_error_responses,
}


@router.post(
    "/tokens",
    responses=create_token_responses,
    status_code=status.HTTP_201_CREATED,
)
def create_token_endpoint_handler(
    request: CredentialRequest,
) -> CreatedCredentialResponse:
    """Handle request to create credential for new account."""
    logger.info("Creating credential for account '%s'", request.account_id)
    try:
        created = app_state.credential_manager.create(
            request.account_id, request.quota
        )
    except DuplicateAccountError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=ConflictResponse(account_id=e.account_id).dump_detail(),
        ) from e
    except StoreError as e:
        raise store_error_to_http_exception(e, "create token") from e
    return CreatedCredentialResponse.from_credential(created)


delete_token_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Credential deleted (or it did not exist)",
        "model": DeleteCredentialResponse,
    },
    **store_error_responses,
}


@router.delete("/tokens/{account_id}", responses=delete_token_responses)
def delete_token_endpoint_handler(account_id: str) -> DeleteCredentialResponse:
    """Handle request to delete credential for given account.

    Deleting credential that does not exist succeeds too.
    """
    logger.info("Deleting credential for account '%s'", account_id)
    try:
        app_state.credential_manager.delete(account_id)
    except StoreError as e:
        raise store_error_to_http_exception(e, "delete token") from e
    return DeleteCredentialResponse(
        account_id=account_id, response="Credential deleted successfully"
    )
