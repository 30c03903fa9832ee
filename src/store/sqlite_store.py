"""Credential store that uses SQLite database."""

import sqlite3
import threading
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Sequence

from log import get_logger
from models.config import SQLiteDatabaseConfiguration
from store.connect_sqlite import connect_sqlite
from store.credential_store import CredentialStore
from store.sql import SQLITE_STATEMENTS
from store.store_error import (
    ConstraintViolationError,
    StoreError,
    StoreUnavailableError,
)
from store.token_cipher import TokenCipher

logger = get_logger(__name__)


class SQLiteCredentialStore(CredentialStore):
    """Credential store that uses SQLite database.

    One connection is shared by all threads. Statements are serialized by a
    lock, which also makes the check-and-increment statement atomic with
    respect to other requests in this process.
    """

    statements = SQLITE_STATEMENTS

    def __init__(self, config: SQLiteDatabaseConfiguration, cipher: TokenCipher) -> None:
        """Create a new instance of SQLite credential store."""
        super().__init__(cipher)
        self.sqlite_config = config
        self.connection: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

        # initialize connection to DB
        # and initialize tables too
        self.connect()

    def connect(self) -> None:
        """Initialize connection to database, nothing is done when it is already open."""
        with self._lock:
            # other thread might have reconnected while this one was waiting
            if self.is_open():
                return
            logger.info("Connecting to SQLite credential store")
            try:
                self.connection = connect_sqlite(self.sqlite_config)
            except sqlite3.Error as e:
                self.connection = None
                raise StoreUnavailableError(
                    f"Unable to open SQLite database {self.sqlite_config.db_path}: {e}"
                ) from e
            try:
                self._initialize_tables()
            except StoreError:
                self.close()
                logger.exception("Error initializing SQLite credential store")
                raise

    def close(self) -> None:
        """Close connection to database."""
        with self._lock:
            if self.connection is not None:
                self.connection.close()
                self.connection = None

    def is_open(self) -> bool:
        """Check if connection was established."""
        return self.connection is not None

    def connected(self) -> bool:
        """Check if connection to database is alive."""
        if self.connection is None:
            logger.warning("Not connected, need to reconnect later")
            return False
        try:
            self._fetchone("SELECT 1")
            logger.debug("Connection to storage is ok")
            return True
        except StoreError as e:
            logger.error("Disconnected from storage: %s", e)
            return False

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        """Provide cursor for exclusive use, driver errors are translated."""
        with self._lock:
            if self.connection is None:
                raise StoreUnavailableError("SQLite credential store is disconnected")
            # it is not possible to use context manager there, because SQLite does
            # not support it
            cursor = self.connection.cursor()
            try:
                yield cursor
            except sqlite3.IntegrityError as e:
                raise ConstraintViolationError(str(e)) from e
            except (sqlite3.OperationalError, sqlite3.ProgrammingError) as e:
                raise StoreUnavailableError(str(e)) from e
            except sqlite3.Error as e:
                raise StoreError(str(e)) from e
            # integer parameters wider than 64 bits are refused by the driver
            except OverflowError as e:
                raise StoreError(f"Parameter out of range: {e}") from e
            finally:
                cursor.close()

    def _execute(self, statement: str, parameters: Sequence[Any] = ()) -> int:
        """Execute statement and return number of affected rows."""
        with self._cursor() as cursor:
            cursor.execute(statement, parameters)
            return cursor.rowcount

    def _fetchone(
        self, statement: str, parameters: Sequence[Any] = ()
    ) -> Optional[tuple[Any, ...]]:
        """Execute query and return the first row, if any."""
        with self._cursor() as cursor:
            cursor.execute(statement, parameters)
            return cursor.fetchone()

    def _fetchall(
        self, statement: str, parameters: Sequence[Any] = ()
    ) -> list[tuple[Any, ...]]:
        """Execute query and return all rows."""
        with self._cursor() as cursor:
            cursor.execute(statement, parameters)
            return cursor.fetchall()
