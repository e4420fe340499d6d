"""
Google Adwords facade.

Builds one Google Ads session at construction and exposes the keyword volume
and location lookups on it, with async-friendly wrappers.
"""

import asyncio
import logging
from typing import Optional, Sequence
from functools import lru_cache

from google.ads.googleads.client import GoogleAdsClient

from google_adwords.ads.session import SessionBuilder
from google_adwords.core.config import Settings, get_settings
from google_adwords.core.retry import RetryPolicy
from google_adwords.schemas.enums import DEFAULT_ATTRIBUTE_TYPES, DisplayType
from google_adwords.schemas.models import Credentials
from google_adwords.schemas.responses import OperationResult
from google_adwords.services.keyword_volume_service import KeywordVolumeReporter
from google_adwords.services.location_service import LocationResolver

logger = logging.getLogger(__name__)


class GoogleAdwords:
    """
    Keyword search volume and location id lookups on one Google Ads session.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        credentials: Optional[Credentials] = None,
        client: Optional[GoogleAdsClient] = None,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        """
        Initialize the facade and build the session.

        Args:
            settings: Settings (defaults to get_settings())
            credentials: Explicit credentials (defaults to those in settings)
            client: A prebuilt GoogleAdsClient; skips the session builder
            retry_policy: Rate limit retry policy shared by both operations

        Raises:
            MissingCredentialsError: If a credential is missing
            ConfigurationError: If the session cannot be built
        """
        self.settings = settings or get_settings()
        self.credentials = credentials or Credentials.from_settings(self.settings)
        self.session = client or SessionBuilder(self.credentials, self.settings).build()
        self.retry_policy = retry_policy or RetryPolicy.from_settings(self.settings)

        self.keyword_reporter = KeywordVolumeReporter(
            self.session,
            self.credentials.customer_id,
            retry_policy=self.retry_policy,
            page_size=self.settings.GOOGLE_ADWORDS_PAGE_SIZE,
        )
        self.location_resolver = LocationResolver(
            self.session,
            self.credentials.customer_id,
            retry_policy=self.retry_policy,
        )

    def collect_keyword_search_volume(
        self,
        keywords: Sequence[str],
        competition: bool = False,
        location_codes: Sequence[int] = (),
        attribute_types: Sequence[str] = DEFAULT_ATTRIBUTE_TYPES,
    ) -> OperationResult:
        """
        Get search volume, average CPC and optional competition for keywords.

        See KeywordVolumeReporter.collect_keyword_search_volume.
        """
        return self.keyword_reporter.collect_keyword_search_volume(
            keywords,
            competition=competition,
            location_codes=location_codes,
            attribute_types=attribute_types,
        )

    def get_location_id(
        self,
        locations: Sequence[str],
        location_type: str = DisplayType.CITY.value,
        locale: str = "en",
    ) -> OperationResult:
        """
        Look up geo target ids for location names.

        See LocationResolver.get_location_id.
        """
        return self.location_resolver.get_location_id(
            locations, location_type=location_type, locale=locale
        )

    async def _run_in_executor(self, func, *args, **kwargs):
        """
        Run a blocking function in executor to make it async-friendly.

        Args:
            func: The function to run
            *args: Positional arguments
            **kwargs: Keyword arguments

        Returns:
            The result of the function
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, lambda: func(*args, **kwargs))

    async def collect_keyword_search_volume_async(self, *args, **kwargs) -> OperationResult:
        """Async variant of collect_keyword_search_volume."""
        return await self._run_in_executor(self.collect_keyword_search_volume, *args, **kwargs)

    async def get_location_id_async(self, *args, **kwargs) -> OperationResult:
        """Async variant of get_location_id."""
        return await self._run_in_executor(self.get_location_id, *args, **kwargs)

    def cancel_retries(self) -> None:
        """Abort the pending rate limit backoff; the waiting call raises RetryCancelledError."""
        self.retry_policy.cancel()

    def reset_retries(self) -> None:
        """Withdraw a cancel_retries() that no backoff has consumed yet."""
        self.retry_policy.reset()


@lru_cache()
def get_google_adwords() -> GoogleAdwords:
    """
    Get a cached GoogleAdwords instance built from settings.

    Returns:
        GoogleAdwords instance
    """
    return GoogleAdwords()
