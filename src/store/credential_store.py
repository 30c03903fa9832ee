"""Abstract class that is the parent for all credential store implementations.

Credential store keeps one record per account:

1. `account_id` unique account identifier
1. `token` bearer token encrypted by `TokenCipher`
1. `quota` number of requests that can be authorized in one billing period,
   zero means unlimited
1. `quota_usage` number of requests already authorized in the current period

Operations that modify quota usage (increment during authorization and reset
at the start of billing period) are implemented as single SQL statements, so
database serializes them per row and no update can be lost.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from log import get_logger
from models.credential import Credential
from store.sql import SQLStatements
from store.store_error import (
    ConstraintViolationError,
    DuplicateAccountError,
    TokenDecryptionError,
)
from store.token_cipher import TokenCipher
from utils.connection_decorator import connection

logger = get_logger(__name__)


class CredentialStore(ABC):
    """Abstract class that is parent for all credential store implementations."""

    statements: SQLStatements

    def __init__(self, cipher: TokenCipher) -> None:
        """Initialize the store with cipher used to encrypt tokens."""
        self.cipher = cipher

    @abstractmethod
    def connect(self) -> None:
        """Initialize connection to database and create tables."""

    @abstractmethod
    def close(self) -> None:
        """Close all connections to database."""

    @abstractmethod
    def is_open(self) -> bool:
        """Check if connection was established (it does not check liveness)."""

    @abstractmethod
    def connected(self) -> bool:
        """Check if database is reachable."""

    @abstractmethod
    def _execute(self, statement: str, parameters: Sequence[Any] = ()) -> int:
        """Execute statement and return number of affected rows."""

    @abstractmethod
    def _fetchone(
        self, statement: str, parameters: Sequence[Any] = ()
    ) -> Optional[tuple[Any, ...]]:
        """Execute query and return the first row, if any."""

    @abstractmethod
    def _fetchall(
        self, statement: str, parameters: Sequence[Any] = ()
    ) -> list[tuple[Any, ...]]:
        """Execute query and return all rows."""

    def _initialize_tables(self) -> None:
        """Initialize tables and indexes used by credential store."""
        logger.info("Initializing table for credentials")
        self._execute(self.statements.create_table)
        logger.info("Initializing index for tokens")
        self._execute(self.statements.create_index)

    def _to_credential(self, row: tuple[Any, ...]) -> Credential:
        """Construct credential from database row, token is decrypted."""
        account_id, token, quota, quota_usage = row
        return Credential(
            account_id=account_id,
            token=self.cipher.decrypt(token),
            quota=quota,
            quota_usage=quota_usage,
        )

    @connection
    def find_by_secret(self, secret: str) -> Optional[Credential]:
        """Find credential by token presented by client.

        The token is encrypted and compared with stored ciphertext.
        """
        if not secret:
            return None
        row = self._fetchone(
            self.statements.select_by_token, (self.cipher.encrypt(secret),)
        )
        if row is None:
            return None
        return self._to_credential(row)

    @connection
    def find_by_account(self, account_id: str) -> Optional[Credential]:
        """Find credential for given account."""
        row = self._fetchone(self.statements.select_by_account, (account_id,))
        if row is None:
            return None
        return self._to_credential(row)

    @connection
    def list_all(self) -> list[Credential]:
        """Retrieve all credentials ordered by account ID.

        Records whose token can not be decrypted by configured key are logged
        and left out.
        """
        rows = self._fetchall(self.statements.select_all)
        credentials = []
        for row in rows:
            try:
                credentials.append(self._to_credential(row))
            except TokenDecryptionError as e:
                logger.error(
                    "Skipping credential for account '%s': %s", row[0], e
                )
        return credentials

    @connection
    def insert(self, account_id: str, secret: str, quota: int) -> None:
        """Insert new credential with zero quota usage.

        Raises:
            DuplicateAccountError: when credential for account already exists.
            ConstraintViolationError: when other constraint refuses the record.
        """
        try:
            self._execute(
                self.statements.insert,
                (account_id, self.cipher.encrypt(secret), quota),
            )
        except ConstraintViolationError as e:
            # token is not decrypted there, the row only needs to exist
            existing = self._fetchone(
                self.statements.select_by_account, (account_id,)
            )
            if existing is not None:
                raise DuplicateAccountError(account_id) from e
            raise

    @connection
    def delete(self, account_id: str) -> bool:
        """Delete credential for given account, return True if it existed."""
        return self._execute(self.statements.delete, (account_id,)) > 0

    @connection
    def increment_usage(self, secret: str) -> bool:
        """Increment quota usage if quota is limited and not yet exhausted.

        Returns:
            True when usage was incremented, False when no credential with
            available quota matches the token.
        """
        updated = self._execute(
            self.statements.increment_usage, (self.cipher.encrypt(secret),)
        )
        return updated > 0

    @connection
    def reset_all_usage(self) -> int:
        """Set quota usage to zero for all credentials, return number of changed rows."""
        return self._execute(self.statements.reset_usage)
