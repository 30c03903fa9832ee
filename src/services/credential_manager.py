"""Credential lifecycle management.

Credentials are created, displayed and deleted by administrative operations
only, the authorization hot path does not use this module. New tokens are
generated here; they are handed out in plaintext just once, in the response
to the create operation.
"""

import uuid
from typing import Optional

import constants
import metrics
from log import get_logger
from models.credential import CreatedCredential, Credential
from store.credential_store import CredentialStore
from store.store_error import DuplicateAccountError

logger = get_logger(__name__)


def generate_secret() -> str:
    """Generate new unguessable token (128 random bits without separators)."""
    return uuid.uuid4().hex


class CredentialManager:
    """Create, retrieve, list and delete credentials."""

    def __init__(self, store: CredentialStore) -> None:
        """Initialize the manager with credential store."""
        self.store = store

    def create(self, account_id: str, quota: int) -> CreatedCredential:
        """Create credential for new account.

        Args:
            account_id: Account identifier, it must not be used by any other credential.
            quota: Number of requests allowed per month, 0 means unlimited.

        Returns:
            Newly created credential including plaintext token.

        Raises:
            ValueError: When account ID is empty or quota is out of range.
            DuplicateAccountError: When the account already has a credential.
            StoreError: When credential store fails.
        """
        if not account_id:
            raise ValueError("Account ID must not be empty")
        if quota < 0:
            raise ValueError("Quota must not be negative")
        if quota > constants.MAX_QUOTA:
            raise ValueError(f"Quota must not be greater than {constants.MAX_QUOTA}")

        token = generate_secret()

        # the primary key in store guards against concurrent creates too
        if self.store.find_by_account(account_id) is not None:
            logger.warning("Account '%s' already exists", account_id)
            raise DuplicateAccountError(account_id)

        self.store.insert(account_id, token, quota)
        metrics.credential_operations_total.labels("create").inc()
        logger.info("Credential for account '%s' created with quota %d", account_id, quota)
        return CreatedCredential(account_id=account_id, token=token, quota=quota)

    def get(self, account_id: str) -> Optional[Credential]:
        """Retrieve credential for given account or None if it does not exist."""
        return self.store.find_by_account(account_id)

    def list_all(self) -> list[Credential]:
        """Retrieve all credentials."""
        return self.store.list_all()

    def delete(self, account_id: str) -> None:
        """Delete credential for given account.

        Deleting credential that does not exist is not an error.
        """
        if self.store.delete(account_id):
            metrics.credential_operations_total.labels("delete").inc()
            logger.info("Credential for account '%s' deleted", account_id)
        else:
            logger.info("No credential for account '%s' to delete", account_id)
