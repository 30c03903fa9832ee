"""Unit tests for SQLiteDatabaseConfiguration model."""

import pytest
from pydantic import ValidationError

from models.config import SQLiteDatabaseConfiguration


def test_sqlite_database_configuration() -> None:
    """Test the SQLite database configuration."""
    c = SQLiteDatabaseConfiguration(db_path="/tmp/foo/bar/baz")
    assert c.db_path == "/tmp/foo/bar/baz"


def test_sqlite_database_configuration_empty_path() -> None:
    """Test that path to database has to be set."""
    with pytest.raises(ValidationError, match="at least 1 character"):
        SQLiteDatabaseConfiguration(db_path="")


def test_sqlite_database_configuration_missing_path() -> None:
    """Test that path to database has to be set."""
    with pytest.raises(ValidationError, match="Field required"):
        SQLiteDatabaseConfiguration()  # pyright: ignore[reportCallIssue]
