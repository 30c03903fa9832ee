"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from typing import Generator

import pytest

from models.config import SQLiteDatabaseConfiguration
from quota.quota_authorizer import QuotaAuthorizer
from services.credential_manager import CredentialManager
from store.sqlite_store import SQLiteCredentialStore
from store.token_cipher import TokenCipher

TEST_ENCRYPTION_KEY = "unit-test-encryption-key"


@pytest.fixture(name="cipher")
def cipher_fixture() -> TokenCipher:
    """Cipher with key used by unit tests."""
    return TokenCipher(TEST_ENCRYPTION_KEY)


@pytest.fixture(name="sqlite_store")
def sqlite_store_fixture(cipher: TokenCipher) -> Generator:
    """Credential store residing in memory."""
    store = SQLiteCredentialStore(SQLiteDatabaseConfiguration(db_path=":memory:"), cipher)
    yield store
    store.close()


@pytest.fixture(name="credential_manager")
def credential_manager_fixture(sqlite_store: SQLiteCredentialStore) -> CredentialManager:
    """Credential manager on top of in-memory store."""
    return CredentialManager(sqlite_store)


@pytest.fixture(name="quota_authorizer")
def quota_authorizer_fixture(sqlite_store: SQLiteCredentialStore) -> QuotaAuthorizer:
    """Quota authorizer on top of in-memory store."""
    return QuotaAuthorizer(sqlite_store)
