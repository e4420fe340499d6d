"""
Shared execution loop for Google Ads services.

Every remote call goes through BaseAdwordsService._execute, which retries the
whole call on rate limit errors and turns any other API error into a failed
OperationResult.
"""
import logging
from typing import Callable, Optional, TypeVar

from google.ads.googleads.client import GoogleAdsClient
from google.ads.googleads.errors import GoogleAdsException

from google_adwords.ads.errors import parse_google_ads_exception, rate_limit_retry_after
from google_adwords.core.retry import RetryPolicy
from google_adwords.schemas.responses import OperationResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseAdwordsService:
    """Base class for services that call the Google Ads API."""

    def __init__(
        self,
        client: GoogleAdsClient,
        customer_id: str,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        """
        Initialize the service.

        Args:
            client: Session returned by the session builder
            customer_id: Customer id requests run under
            retry_policy: Rate limit retry policy (defaults to settings)
        """
        self.client = client
        self.customer_id = customer_id
        self.retry_policy = retry_policy or RetryPolicy.from_settings()

    def _execute(self, operation: str, call: Callable[[], T]) -> OperationResult:
        """
        Run a remote call, retrying it on rate limit errors.

        Args:
            operation: Name used in log messages
            call: Zero-argument callable issuing the request and shaping the data

        Returns:
            OperationResult with the call's data, or the errors that stopped it

        Raises:
            RetryCancelledError: If the retry policy is cancelled during a backoff
        """
        attempt = 0
        while True:
            attempt += 1
            try:
                data = call()
            except GoogleAdsException as ex:
                errors = parse_google_ads_exception(ex)
                for error in errors:
                    logger.info(error.to_json(), extra={"operation": operation, "attempt": attempt})

                rate_errors = [error for error in errors if error.is_rate_exceeded]
                if not rate_errors:
                    for error in errors:
                        logger.info(f"{operation} failed with {error.kind}.{error.code}")
                    return OperationResult.failure(errors, attempts=attempt)

                if not self.retry_policy.should_retry(attempt):
                    logger.error(
                        f"{operation}: rate limit exceeded, giving up after {attempt} attempts",
                        extra={"operation": operation, "attempt": attempt},
                    )
                    return OperationResult.failure(errors, attempts=attempt, rate_limited=True)

                delay = self.retry_policy.compute_delay(rate_limit_retry_after(errors))
                logger.info("Rate Exceeded.")
                logger.info(
                    f"Retry after {delay:.2f} seconds",
                    extra={"operation": operation, "attempt": attempt},
                )
                self.retry_policy.sleep(delay)
                continue

            return OperationResult.ok(data, attempts=attempt)
