"""Credential store factory class."""

import constants
from log import get_logger
from models.config import CredentialStoreConfiguration
from store.credential_store import CredentialStore
from store.postgres_store import PostgresCredentialStore
from store.sqlite_store import SQLiteCredentialStore
from store.token_cipher import TokenCipher

logger = get_logger(__name__)


# pylint: disable=too-few-public-methods
class CredentialStoreFactory:
    """Credential store factory class."""

    @staticmethod
    def credential_store(config: CredentialStoreConfiguration) -> CredentialStore:
        """Create an instance of credential store based on loaded configuration.

        The encryption key is taken from the configuration and injected into
        the store, it is never read from environment by the store itself.

        Returns:
            An instance of `CredentialStore` (either `SQLiteCredentialStore`
            or `PostgresCredentialStore`).
        """
        logger.info("Creating credential store of type %s", config.store_type)
        cipher = TokenCipher(config.encryption_key.get_secret_value())
        match config.store_type:
            case constants.STORE_TYPE_SQLITE:
                if config.sqlite is not None:
                    return SQLiteCredentialStore(config.sqlite, cipher)
                raise ValueError("Expecting configuration for SQLite store")
            case constants.STORE_TYPE_POSTGRES:
                if config.postgres is not None:
                    return PostgresCredentialStore(config.postgres, cipher)
                raise ValueError("Expecting configuration for PostgreSQL store")
            case _:
                raise ValueError(f"Invalid credential store type: {config.store_type}")
