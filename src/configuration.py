"""Configuration loader."""

import os
import re
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from log import get_logger
from models.config import (
    Configuration,
    CredentialStoreConfiguration,
    QuotaSchedulerConfiguration,
    ServiceConfiguration,
)

logger = get_logger(__name__)


class LogicError(Exception):
    """Error in application logic."""


class ConfigurationError(Exception):
    """Configuration is missing or invalid, the service can not start."""


ENV_VAR_REFERENCE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def replace_env_vars(value: Any) -> Any:
    """Replace ${VAR} references in all strings by environment variables.

    References to variables that are not set are replaced by empty string, so
    validation of the configuration reports them as missing values.
    """
    if isinstance(value, dict):
        return {key: replace_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [replace_env_vars(item) for item in value]
    if isinstance(value, str):
        return ENV_VAR_REFERENCE.sub(
            lambda match: os.environ.get(match.group(1), ""), value
        )
    return value


class AppConfig:
    """Singleton class to load and store the configuration."""

    _instance = None

    def __new__(cls, *args: Any, **kwargs: Any) -> "AppConfig":
        """Create a new instance of the class."""
        if not isinstance(cls._instance, cls):
            cls._instance = super().__new__(cls, *args, **kwargs)
            cls._instance._configuration = None
        return cls._instance

    def __init__(self) -> None:
        """Initialize the class instance."""
        self._configuration: Optional[Configuration]

    def load_configuration(self, filename: str) -> None:
        """Load configuration from YAML file.

        Raises:
            ConfigurationError: When file can not be read or is not valid.
        """
        try:
            with open(filename, encoding="utf-8") as fin:
                config_dict = yaml.safe_load(fin)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Unable to read configuration file {filename}: {e}"
            ) from e
        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                f"Configuration file {filename} is empty or is not a mapping"
            )
        config_dict = replace_env_vars(config_dict)
        self.init_from_dict(config_dict)
        logger.info("Loaded configuration from %s", filename)

    def init_from_dict(self, config_dict: dict[Any, Any]) -> None:
        """Initialize configuration from a dictionary."""
        try:
            self._configuration = Configuration(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def is_loaded(self) -> bool:
        """Check if configuration has been loaded."""
        return self._configuration is not None

    @property
    def configuration(self) -> Configuration:
        """Return the whole configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration

    @property
    def service_configuration(self) -> ServiceConfiguration:
        """Return service configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration.service

    @property
    def credential_store_configuration(self) -> CredentialStoreConfiguration:
        """Return credential store configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration.credential_store

    @property
    def quota_scheduler_configuration(self) -> QuotaSchedulerConfiguration:
        """Return quota scheduler configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration.quota_scheduler


configuration: AppConfig = AppConfig()
