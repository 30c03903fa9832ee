"""Quota scheduler runner.

Quota usage of all credentials is reset at the start of every billing period,
i.e. at 00:00:00 UTC on the first day of each month. The scheduler sleeps
until the next boundary, resets usage and repeats. The next boundary is always
computed from the current time, so failed reset is not retried before the
following month.
"""

from datetime import datetime, timezone
from threading import Event, Thread
from typing import Callable, Optional

import metrics
from log import get_logger
from store.credential_store import CredentialStore

logger = get_logger(__name__)


def utc_now() -> datetime:
    """Return current time in UTC."""
    return datetime.now(timezone.utc)


def next_period_start(now: datetime) -> datetime:
    """Compute start of the next billing period (first day of next month, midnight UTC)."""
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    if now.month == 12:
        return datetime(now.year + 1, 1, 1, tzinfo=timezone.utc)
    return datetime(now.year, now.month + 1, 1, tzinfo=timezone.utc)


class QuotaResetScheduler:
    """Periodic task that resets quota usage at every month boundary."""

    def __init__(
        self,
        store: CredentialStore,
        stop_event: Optional[Event] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the scheduler, it is not started yet."""
        self.store = store
        self.stop_event = stop_event if stop_event is not None else Event()
        self.clock = clock
        self.thread: Optional[Thread] = None

    def run_once(self) -> bool:
        """Reset quota usage for all credentials, return True on success."""
        logger.info("Quota usage reset started")
        try:
            changed = self.store.reset_all_usage()
        except Exception as e:  # pylint: disable=broad-exception-caught
            metrics.quota_resets_total.labels("failure").inc()
            logger.error("Quota usage reset error: %s", e)
            return False
        metrics.quota_resets_total.labels("success").inc()
        logger.info("Quota usage reset finished, changed %d rows in database", changed)
        return True

    def wait_for_next_period(self) -> bool:
        """Sleep until next period starts, return False if the scheduler was stopped."""
        deadline = next_period_start(self.clock())
        logger.info("Next quota usage reset scheduled at %s", deadline.isoformat())
        while not self.stop_event.is_set():
            remaining = (deadline - self.clock()).total_seconds()
            if remaining <= 0:
                return True
            # wake up regularly so clock changes (suspend etc.) are noticed
            self.stop_event.wait(min(remaining, 3600.0))
        return False

    def run(self) -> None:
        """Quota scheduler loop, it ends only when the scheduler is stopped."""
        logger.info("Quota scheduler started")
        while self.wait_for_next_period():
            self.run_once()
        logger.info("Quota scheduler stopped")

    def start(self) -> None:
        """Start the scheduler loop in separate daemon thread."""
        self.thread = Thread(target=self.run, name="quota-scheduler", daemon=True)
        self.thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        """Signal the scheduler loop to finish and wait for the thread."""
        logger.info("Stopping quota scheduler")
        self.stop_event.set()
        if self.thread is not None:
            self.thread.join(timeout)


def start_quota_scheduler(store: CredentialStore) -> QuotaResetScheduler:
    """Start quota scheduler in separate thread."""
    logger.info("Starting quota scheduler")
    scheduler = QuotaResetScheduler(store)
    scheduler.start()
    return scheduler
