"""
Backoff policy for Google Ads rate limit errors.

The delay before a retry is the provider's retry-after value multiplied by a
random factor in [1.0, 2.0). Waits block on a threading.Event so another
thread can cancel them.
"""
import logging
import random
import threading
from typing import Callable, Optional

from google_adwords.core.config import Settings, get_settings
from google_adwords.core.exceptions import RetryCancelledError

logger = logging.getLogger(__name__)


class RetryPolicy:
    """
    Bounded, jittered, cancellable retry policy.
    """

    def __init__(
        self,
        max_retries: int = 5,
        default_retry_after: float = 30.0,
        max_backoff: float = 600.0,
        cancel_event: Optional[threading.Event] = None,
        wait: Optional[Callable[[float], bool]] = None,
        jitter: Callable[[], float] = random.random,
    ):
        """
        Initialize the retry policy.

        Args:
            max_retries: Retries allowed after the first attempt
            default_retry_after: Base delay when the API supplies none
            max_backoff: Upper bound for a single delay, in seconds
            cancel_event: Event that aborts pending waits when set
            wait: Callable that waits up to the given seconds and returns
                True if the wait was interrupted (defaults to cancel_event.wait)
            jitter: Source of random numbers in [0.0, 1.0)
        """
        self.max_retries = max_retries
        self.default_retry_after = default_retry_after
        self.max_backoff = max_backoff
        self.cancel_event = cancel_event or threading.Event()
        self._wait = wait or self.cancel_event.wait
        self._jitter = jitter

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "RetryPolicy":
        """
        Build a policy from the GOOGLE_ADWORDS_* retry settings.

        Args:
            settings: Settings to read (defaults to get_settings())

        Returns:
            RetryPolicy: The configured policy
        """
        settings = settings or get_settings()
        return cls(
            max_retries=settings.GOOGLE_ADWORDS_MAX_RETRIES,
            default_retry_after=settings.GOOGLE_ADWORDS_DEFAULT_RETRY_AFTER,
            max_backoff=settings.GOOGLE_ADWORDS_MAX_BACKOFF,
        )

    def should_retry(self, attempt: int) -> bool:
        """Return True if another attempt may follow the given attempt number."""
        return attempt <= self.max_retries

    def compute_delay(self, retry_after_seconds: Optional[float] = None) -> float:
        """
        Compute the jittered delay for one retry.

        Args:
            retry_after_seconds: Provider supplied retry-after value

        Returns:
            float: Seconds to wait, in [base, 2 * base) unless capped
        """
        base = retry_after_seconds if retry_after_seconds else self.default_retry_after
        delay = base * (1.0 + self._jitter())
        return min(delay, self.max_backoff)

    def sleep(self, delay: float) -> None:
        """
        Wait for the given delay.

        Raises:
            RetryCancelledError: If cancel() was called before or during the wait.
                The cancellation is consumed, so later calls retry normally.
        """
        if self.cancel_event.is_set():
            self.reset()
            raise RetryCancelledError(detail="Retry cancelled before backoff started")
        if self._wait(delay):
            self.reset()
            raise RetryCancelledError(
                detail=f"Retry cancelled during {delay:.2f}s backoff", delay=delay
            )

    def cancel(self) -> None:
        """Abort the pending backoff, or the next one if none is pending."""
        logger.info("Cancelling pending Google Ads retries")
        self.cancel_event.set()

    def reset(self) -> None:
        """Allow retries again after cancel()."""
        self.cancel_event.clear()
