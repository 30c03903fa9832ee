"""SQLite connection handler."""

import sqlite3

from log import get_logger
from models.config import SQLiteDatabaseConfiguration

logger = get_logger(__name__)


def connect_sqlite(config: SQLiteDatabaseConfiguration) -> sqlite3.Connection:
    """Initialize connection to SQLite database.

    The connection is shared by all threads (request handlers and quota
    scheduler), so access to it needs to be serialized by the caller.
    Statements are committed immediately (autocommit mode).
    """
    logger.info("Connecting to SQLite storage %s", config.db_path)
    try:
        return sqlite3.connect(
            database=config.db_path,
            check_same_thread=False,
            isolation_level=None,
        )
    except sqlite3.Error as e:
        logger.exception("Error connecting to SQLite database:\n%s", e)
        raise
