"""Models for REST API responses."""

from typing import Any

from pydantic import BaseModel, Field

from models.credential import CreatedCredential, Credential

# number of trailing token characters shown to administrators
TOKEN_HINT_LENGTH = 4


class CreatedCredentialResponse(BaseModel):
    """Model representing a response to credential creation request.

    The token is returned in plaintext only in this response. It can not be
    retrieved again later.

    Attributes:
        account_id: Account identifier.
        token: Newly generated bearer token.
        quota: Number of requests allowed per month, 0 means unlimited.
    """

    account_id: str = Field(..., description="Account identifier", examples=["acme"])
    token: str = Field(
        ...,
        description="Bearer token, shown only once",
        examples=["0b5c3d1f8a5e4e5d9c1e2f3a4b5c6d7e"],
    )
    quota: int = Field(
        ...,
        description="Number of requests allowed per month, 0 means unlimited",
        examples=[1000],
    )

    @classmethod
    def from_credential(cls, credential: CreatedCredential) -> "CreatedCredentialResponse":
        """Construct response from newly created credential."""
        return cls(
            account_id=credential.account_id,
            token=credential.token,
            quota=credential.quota,
        )


class CredentialResponse(BaseModel):
    """Model representing one credential in administrative responses.

    Only the last few characters of token are displayed.

    Example:
        ```python
        credential_response = CredentialResponse(
            account_id="acme", token_hint="...6d7e", quota=1000, quota_usage=42
        )
        ```
    """

    account_id: str = Field(..., description="Account identifier", examples=["acme"])
    token_hint: str = Field(
        ...,
        description="Trailing characters of the bearer token",
        examples=["...6d7e"],
    )
    quota: int = Field(
        ...,
        description="Number of requests allowed per month, 0 means unlimited",
        examples=[1000],
    )
    quota_usage: int = Field(
        ...,
        description="Number of requests admitted in the current month",
        examples=[42],
    )

    @classmethod
    def from_credential(cls, credential: Credential) -> "CredentialResponse":
        """Construct response from credential record, masking the token."""
        return cls(
            account_id=credential.account_id,
            token_hint="..." + credential.token[-TOKEN_HINT_LENGTH:],
            quota=credential.quota,
            quota_usage=credential.quota_usage,
        )


class DeleteCredentialResponse(BaseModel):
    """Model representing a response to credential deletion request."""

    account_id: str = Field(..., description="Account identifier", examples=["acme"])
    response: str = Field(
        ...,
        description="Human readable result of deletion",
        examples=["Credential deleted successfully"],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "account_id": "acme",
                    "response": "Credential deleted successfully",
                }
            ]
        }
    }


class AuthorizationResponse(BaseModel):
    """Model representing successful authorization check."""

    authorized: bool = Field(
        ...,
        description="Flag indicating that the request is authorized",
        examples=[True],
    )


class ReadinessResponse(BaseModel):
    """Model representing response to a readiness request.

    Attributes:
        ready: If service is ready.
        reason: The reason for the readiness.

    Example:
        ```python
        readiness_response = ReadinessResponse(ready=True, reason="Service is ready")
        ```
    """

    ready: bool = Field(
        ...,
        description="Flag indicating if service is ready",
        examples=[True, False],
    )

    reason: str = Field(
        ...,
        description="The reason for the readiness",
        examples=["Service is ready", "Credential store is not reachable"],
    )


class LivenessResponse(BaseModel):
    """Model representing a response to a liveness request.

    Attributes:
        alive: If app is alive.

    Example:
        ```python
        liveness_response = LivenessResponse(alive=True)
        ```
    """

    alive: bool = Field(
        ...,
        description="Flag indicating that the app is alive",
        examples=[True, False],
    )

    # provides examples for /docs endpoint
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "alive": True,
                }
            ]
        }
    }


class DetailModel(BaseModel):
    """Nested detail model for error responses."""

    response: str = Field(..., description="Short summary of the error")
    cause: str = Field(..., description="Detailed explanation of what caused the error")


class AbstractErrorResponse(BaseModel):
    """Base class for all error responses.

    Contains a nested `detail` field.
    """

    detail: DetailModel

    def dump_detail(self) -> dict[str, Any]:
        """Return dict in FastAPI HTTPException format."""
        return self.detail.model_dump()


class BadRequestResponse(AbstractErrorResponse):
    """400 Bad Request - Authorization header is missing."""

    def __init__(self, cause: str = "Authorization header is required"):
        """Initialize a BadRequestResponse."""
        super().__init__(detail=DetailModel(response="Bad request", cause=cause))

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "detail": {
                        "response": "Bad request",
                        "cause": "Authorization header is required",
                    }
                }
            ]
        }
    }


class UnauthorizedResponse(AbstractErrorResponse):
    """401 Unauthorized - Missing or invalid credentials."""

    def __init__(self) -> None:
        """Initialize an UnauthorizedResponse when authentication fails."""
        super().__init__(
            detail=DetailModel(
                response="Unauthorized",
                cause="Missing or invalid credentials provided by client",
            )
        )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "detail": {
                        "response": "Unauthorized",
                        "cause": "Missing or invalid credentials provided by client",
                    }
                }
            ]
        }
    }


class NotFoundResponse(AbstractErrorResponse):
    """404 Not Found - Resource does not exist."""

    def __init__(self, resource: str, resource_id: str):
        """Initialize a NotFoundResponse when a resource cannot be located."""
        super().__init__(
            detail=DetailModel(
                response=f"{resource.title()} not found",
                cause=f"{resource.title()} with ID {resource_id} does not exist.",
            )
        )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "detail": {
                        "response": "Credential not found",
                        "cause": "Credential with ID acme does not exist.",
                    }
                }
            ]
        }
    }


class ConflictResponse(AbstractErrorResponse):
    """409 Conflict - Account already has a credential."""

    def __init__(self, account_id: str):
        """Initialize a ConflictResponse for duplicate account."""
        super().__init__(
            detail=DetailModel(
                response="Account already exists",
                cause=f"Account '{account_id}' already has a credential.",
            )
        )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "detail": {
                        "response": "Account already exists",
                        "cause": "Account 'acme' already has a credential.",
                    }
                }
            ]
        }
    }


class QuotaExceededResponse(AbstractErrorResponse):
    """429 Too Many Requests - monthly quota exceeded."""

    def __init__(self) -> None:
        """Initialize a QuotaExceededResponse."""
        super().__init__(
            detail=DetailModel(
                response="The quota has been exceeded",
                cause="Limit exceeded, quota will be reset at the start of next month.",
            )
        )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "detail": {
                        "response": "The quota has been exceeded",
                        "cause": "Limit exceeded, quota will be reset at the start of next month.",
                    }
                }
            ]
        }
    }


class ServiceUnavailableResponse(AbstractErrorResponse):
    """503 Backend Unavailable - Unable to reach credential store."""

    def __init__(self, cause: str):
        """Initialize a ServiceUnavailableResponse when the store is unreachable."""
        super().__init__(
            detail=DetailModel(
                response="Unable to connect to credential store", cause=cause
            )
        )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "detail": {
                        "response": "Unable to connect to credential store",
                        "cause": "Connection refused",
                    }
                }
            ]
        }
    }


class InternalServerErrorResponse(AbstractErrorResponse):
    """500 Internal Server Error - unexpected failure in credential store."""

    def __init__(self, response: str, cause: str):
        """Initialize an InternalServerErrorResponse."""
        super().__init__(detail=DetailModel(response=response, cause=cause))

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "detail": {
                        "response": "Failed to update quota usage",
                        "cause": "database disk image is malformed",
                    }
                }
            ]
        }
    }
