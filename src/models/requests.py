"""Models for REST API requests."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

import constants


class CredentialRequest(BaseModel):
    """Model representing a request to create new credential.

    Attributes:
        account_id: The required account identifier, must be unique.
        quota: Number of requests allowed in one billing period, 0 means unlimited.

    Example:
        ```python
        credential_request = CredentialRequest(account_id="acme", quota=1000)
        ```
    """

    account_id: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Unique account identifier",
        examples=["acme"],
        # older clients use camel-case key
        validation_alias=AliasChoices("account_id", "accountID"),
    )

    quota: int = Field(
        0,
        ge=0,
        le=constants.MAX_QUOTA,
        description="Number of requests allowed per month, 0 means unlimited",
        examples=[0, 1000],
    )

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "examples": [
                {
                    "account_id": "acme",
                    "quota": 1000,
                },
            ]
        },
    )
