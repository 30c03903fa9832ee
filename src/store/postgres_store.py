"""Credential store that uses PostgreSQL database."""

import threading
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Sequence

import psycopg2
from psycopg2.pool import PoolError, ThreadedConnectionPool

from log import get_logger
from models.config import PostgreSQLDatabaseConfiguration
from store.connect_pg import connect_pg
from store.credential_store import CredentialStore
from store.sql import POSTGRES_STATEMENTS
from store.store_error import (
    ConstraintViolationError,
    StoreError,
    StoreUnavailableError,
)
from store.token_cipher import TokenCipher

logger = get_logger(__name__)


class PostgresCredentialStore(CredentialStore):
    """Credential store that uses PostgreSQL database.

    Connections are taken from a thread-safe pool shared by request handlers
    and the quota scheduler. Every statement runs in autocommit mode; row
    level locks taken by `UPDATE` serialize concurrent increments and resets
    of the same credential.
    """

    statements = POSTGRES_STATEMENTS

    def __init__(
        self, config: PostgreSQLDatabaseConfiguration, cipher: TokenCipher
    ) -> None:
        """Create a new instance of PostgreSQL credential store."""
        super().__init__(cipher)
        self.postgres_config = config
        self.pool: Optional[ThreadedConnectionPool] = None
        # guards creation and closing of the pool
        self._lock = threading.RLock()

        # initialize connection pool
        # and initialize tables too
        self.connect()

    def connect(self) -> None:
        """Initialize connection pool to database, nothing is done when it is already open."""
        with self._lock:
            # other thread might have reconnected while this one was waiting
            if self.is_open():
                return
            logger.info("Connecting to PostgreSQL credential store")
            try:
                self.pool = connect_pg(self.postgres_config)
            except psycopg2.Error as e:
                self.pool = None
                raise StoreUnavailableError(
                    f"Unable to connect to PostgreSQL database: {e}"
                ) from e
            try:
                self._initialize_schema()
                self._initialize_tables()
            except StoreError:
                self.close()
                logger.exception("Error initializing PostgreSQL credential store")
                raise

    def close(self) -> None:
        """Close all pooled connections."""
        with self._lock:
            if self.pool is not None and not self.pool.closed:
                self.pool.closeall()
            self.pool = None

    def is_open(self) -> bool:
        """Check if connection pool exists."""
        return self.pool is not None and not self.pool.closed

    def connected(self) -> bool:
        """Check if connection to database is alive."""
        if not self.is_open():
            logger.warning("Not connected, need to reconnect later")
            return False
        try:
            self._fetchone("SELECT 1")
            logger.debug("Connection to storage is ok")
            return True
        except StoreError as e:
            logger.error("Disconnected from storage: %s", e)
            return False

    def _initialize_schema(self) -> None:
        """Create schema (namespace) for credentials if it is configured."""
        namespace = self.postgres_config.namespace
        if namespace is None or namespace == "public":
            return
        self._execute(f'CREATE SCHEMA IF NOT EXISTS "{namespace}"')
        logger.info("Schema '%s' created or already exists", namespace)

    @contextmanager
    def _cursor(self) -> Iterator[Any]:
        """Borrow connection from pool and provide cursor, driver errors are translated."""
        pool = self.pool
        if pool is None:
            raise StoreUnavailableError("PostgreSQL credential store is disconnected")
        try:
            conn = pool.getconn()
        except (PoolError, psycopg2.OperationalError) as e:
            raise StoreUnavailableError(f"Unable to get connection: {e}") from e
        try:
            conn.autocommit = True
            with conn.cursor() as cursor:
                yield cursor
        except psycopg2.IntegrityError as e:
            raise ConstraintViolationError(str(e)) from e
        except (psycopg2.OperationalError, psycopg2.InterfaceError) as e:
            raise StoreUnavailableError(str(e)) from e
        except psycopg2.Error as e:
            raise StoreError(str(e)) from e
        finally:
            # broken connections are not returned back into pool
            pool.putconn(conn, close=bool(conn.closed))

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
