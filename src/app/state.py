"""Application state.

Holds the credential store shared by all components together with the
credential manager, quota authorizer and quota scheduler built on top of it.
Components are created when the service starts and released when it stops.
"""

from typing import Optional

from configuration import LogicError
from log import get_logger
from models.config import Configuration
from quota.quota_authorizer import QuotaAuthorizer
from runners.quota_scheduler import QuotaResetScheduler, start_quota_scheduler
from services.credential_manager import CredentialManager
from store.credential_store import CredentialStore
from store.store_factory import CredentialStoreFactory

logger = get_logger(__name__)

# how long to wait for quota scheduler thread during shutdown
SCHEDULER_STOP_TIMEOUT = 5.0


class ApplicationState:
    """Components shared by REST API handlers."""

    def __init__(self) -> None:
        """Initialize empty state, components are created by initialize()."""
        self._store: Optional[CredentialStore] = None
        self._credential_manager: Optional[CredentialManager] = None
        self._quota_authorizer: Optional[QuotaAuthorizer] = None
        self._quota_scheduler: Optional[QuotaResetScheduler] = None

    def initialize(self, config: Configuration) -> None:
        """Create credential store and all components that use it.

        Raises:
            StoreError: When credential store can not be initialized.
        """
        logger.info("Initializing application state")
        store = CredentialStoreFactory.credential_store(config.credential_store)
        self._store = store
        self._credential_manager = CredentialManager(store)
        self._quota_authorizer = QuotaAuthorizer(store)
        if config.quota_scheduler.enabled:
            self._quota_scheduler = start_quota_scheduler(store)
        else:
            logger.warning("Quota scheduler is disabled, quota usage won't be reset")
        logger.info("Application state initialized")

    def shutdown(self) -> None:
        """Stop quota scheduler and close credential store."""
        logger.info("Shutting down application state")
        if self._quota_scheduler is not None:
            self._quota_scheduler.stop(SCHEDULER_STOP_TIMEOUT)
            self._quota_scheduler = None
        if self._store is not None:
            self._store.close()
        self._store = None
        self._credential_manager = None
        self._quota_authorizer = None

    @property
    def is_fully_initialized(self) -> bool:
        """Check if application is fully initialized."""
        return self._store is not None

    @property
    def store(self) -> CredentialStore:
        """Return credential store."""
        if self._store is None:
            raise LogicError("logic error: credential store is not initialized")
        return self._store

    @property
    def credential_manager(self) -> CredentialManager:
        """Return credential manager."""
        if self._credential_manager is None:
            raise LogicError("logic error: credential manager is not initialized")
        return self._credential_manager

    @property
    def quota_authorizer(self) -> QuotaAuthorizer:
        """Return quota authorizer."""
        if self._quota_authorizer is None:
            raise LogicError("logic error: quota authorizer is not initialized")
        return self._quota_authorizer

    def check_health(self) -> tuple[bool, str]:
        """Check if credential store is reachable.

        Returns:
            tuple[bool, str]: (is_ready, reason)
        """
        if self._store is None:
            return False, "Application initialization not complete"
        if not self._store.connected():
            return False, "Credential store is not reachable"
        return True, "Service is ready"


app_state = ApplicationState()
