"""Models for credential records kept in the credential store."""

from pydantic import BaseModel, Field, NonNegativeInt

import constants


class Credential(BaseModel):
    """Credential record with token already decrypted.

    Attributes:
        account_id: Unique identifier of account the credential belongs to.
        token: The bearer token (plaintext, decrypted from the store).
        quota: Number of requests allowed in one billing period, 0 is unlimited.
        quota_usage: Number of requests already admitted in current period.
    """

    account_id: str = Field(..., min_length=1)
    token: str = Field(..., repr=False)
    quota: NonNegativeInt
    quota_usage: NonNegativeInt = 0

    @property
    def unlimited(self) -> bool:
        """Check if no usage accounting is enforced for this credential."""
        return self.quota == constants.UNLIMITED_QUOTA

    @property
    def exhausted(self) -> bool:
        """Check if the quota is limited and already used up."""
        return not self.unlimited and self.quota_usage >= self.quota


class CreatedCredential(BaseModel):
    """Newly created credential.

    This is the only place where the token is handed out in plaintext outside
    of the authorization check.
    """

    account_id: str
    token: str = Field(..., repr=False)
    quota: NonNegativeInt
