"""PostgreSQL connection pool handler."""

from typing import Any

import psycopg2
from psycopg2.pool import ThreadedConnectionPool

from log import get_logger
from models.config import PostgreSQLDatabaseConfiguration

logger = get_logger(__name__)


def connection_arguments(config: PostgreSQLDatabaseConfiguration) -> dict[str, Any]:
    """Prepare keyword arguments for psycopg2.connect from configuration."""
    arguments: dict[str, Any] = {
        "host": config.host,
        "port": config.port,
        "user": config.user,
        "password": config.password.get_secret_value(),
        "dbname": config.db,
        "sslmode": config.ssl_mode,
        "gssencmode": config.gss_encmode,
    }
    if config.namespace is not None and config.namespace != "public":
        arguments["options"] = f"-csearch_path={config.namespace}"
    if config.ca_cert_path is not None:
        arguments["sslrootcert"] = str(config.ca_cert_path)
    return arguments


def connect_pg(config: PostgreSQLDatabaseConfiguration) -> ThreadedConnectionPool:
    """Initialize pool of connections to PostgreSQL database."""
    logger.info(
        "Connecting to PostgreSQL storage %s:%d/%s (pool size %d..%d)",
        config.host,
        config.port,
        config.db,
        config.pool_min_size,
        config.pool_max_size,
    )
    try:
        return ThreadedConnectionPool(
            config.pool_min_size,
            config.pool_max_size,
            **connection_arguments(config),
        )
    except psycopg2.Error as e:
        logger.exception("Error connecting to PostgreSQL database:\n%s", e)
        raise
