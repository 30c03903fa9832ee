"""Shared fixtures for integration tests."""

from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from configuration import AppConfig, configuration

CONFIGURATION_DIRECTORY = Path(__file__).parent.parent / "configuration"


@pytest.fixture(autouse=True)
def reset_configuration_state() -> Generator:
    """Reset configuration state before each integration test.

    This autouse fixture ensures test independence by resetting the
    singleton configuration state before each test runs.
    """
    # pylint: disable=protected-access
    configuration._configuration = None
    yield


@pytest.fixture(name="test_config", scope="function")
def test_config_fixture(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[AppConfig, None, None]:
    """Load real configuration for integration tests.

    Credential store is a fresh SQLite database in temporary directory.
    """
    config_path = CONFIGURATION_DIRECTORY / "quota-gate.yaml"
    assert config_path.exists(), f"Config file not found: {config_path}"

    monkeypatch.setenv("QUOTA_GATE_TEST_DB_PATH", str(tmp_path / "credentials.db"))
    configuration.load_configuration(str(config_path))

    yield configuration
    # Note: Cleanup is handled by the autouse reset_configuration_state fixture


@pytest.fixture(name="client")
def client_fixture(test_config: AppConfig) -> Generator[TestClient, None, None]:
    """REST API client, the application is started and stopped around each test."""
    _ = test_config
    from app.main import app  # pylint: disable=import-outside-toplevel

    with TestClient(app) as client:
        yield client
