"""Quota authorization engine.

Decides whether the request with given bearer token is authorized and
accounts for its usage:

1. token that does not belong to any credential is unauthorized
1. credential with quota set to zero is not limited, usage is not counted
1. credential with exhausted quota is rejected
1. otherwise quota usage is incremented and request is authorized

Checking available quota and incrementing usage is performed by one atomic
statement in credential store, so concurrent requests for the same
credential can never be admitted more times than the quota allows.
"""

from enum import Enum

import metrics
from log import get_logger
from store.credential_store import CredentialStore
from store.store_error import StoreError

logger = get_logger(__name__)


class Verdict(str, Enum):
    """Result of authorization check."""

    AUTHORIZED = "authorized"
    QUOTA_EXCEEDED = "quota_exceeded"
    UNAUTHORIZED = "unauthorized"


class QuotaAuthorizer:
    """Authorize requests and account for quota usage."""

    def __init__(self, store: CredentialStore) -> None:
        """Initialize the authorizer with credential store."""
        self.store = store

    def authorize(self, secret: str) -> Verdict:
        """Authorize request with given token.

        Raises:
            StoreError: When quota usage can not be updated.
        """
        verdict = self._authorize(secret)
        metrics.authorization_verdicts_total.labels(verdict.value).inc()
        return verdict

    def _authorize(self, secret: str) -> Verdict:
        if not secret:
            return Verdict.UNAUTHORIZED

        try:
            credential = self.store.find_by_secret(secret)
        except StoreError as e:
            logger.error("Unable to look up credential: %s", e)
            return Verdict.UNAUTHORIZED

        if credential is None:
            logger.info("Unknown token presented")
            return Verdict.UNAUTHORIZED

        if credential.unlimited:
            logger.debug("Account '%s' has unlimited quota", credential.account_id)
            return Verdict.AUTHORIZED

        if credential.exhausted:
            logger.info("Quota exceeded for account '%s'", credential.account_id)
            return Verdict.QUOTA_EXCEEDED

        try:
            incremented = self.store.increment_usage(secret)
        except StoreError as e:
            logger.error(
                "Failed to update quota usage for account '%s': %s",
                credential.account_id,
                e,
            )
            raise

        if not incremented:
            # quota was consumed by concurrent requests meanwhile
            logger.info("Quota exceeded for account '%s'", credential.account_id)
            return Verdict.QUOTA_EXCEEDED

        return Verdict.AUTHORIZED
