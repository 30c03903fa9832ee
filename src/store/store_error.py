"""Errors raised by credential store."""


class StoreError(Exception):
    """Unexpected failure of credential store."""


class StoreUnavailableError(StoreError):
    """Credential store can not be reached."""


class ConstraintViolationError(StoreError):
    """Statement was refused by database constraint."""


class DuplicateAccountError(StoreError):
    """Credential for given account already exists."""

    def __init__(self, account_id: str) -> None:
        """Initialize the error for given account."""
        super().__init__(f"Account '{account_id}' already exists")
        self.account_id = account_id


class TokenDecryptionError(StoreError):
    """Stored token can not be decrypted by configured key."""
