"""
Google Ads session builder.

Turns the five credential values into a GoogleAdsClient. Failures here are
fatal: they raise immediately and are never retried.
"""

import logging
from typing import Any, Dict, Optional

from google.ads.googleads.client import GoogleAdsClient

from google_adwords.core.config import Settings, get_settings
from google_adwords.core.exceptions import ConfigurationError, MissingCredentialsError
from google_adwords.core.logging_config import set_google_ads_log_level
from google_adwords.schemas.models import Credentials

logger = logging.getLogger(__name__)

# Credentials field -> settings name, used in error messages
REQUIRED_FIELDS = {
    "manager_id": "GOOGLE_ADWORDS_MANAGER_ID",
    "client_id": "GOOGLE_ADWORDS_CLIENT_ID",
    "client_secret": "GOOGLE_ADWORDS_CLIENT_SECRET",
    "refresh_token": "GOOGLE_ADWORDS_REFRESH_TOKEN",
    "developer_token": "GOOGLE_ADWORDS_DEVELOPER_TOKEN",
}


class SessionBuilder:
    """
    Builds an authenticated GoogleAdsClient from Credentials.
    """

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the session builder.

        Args:
            credentials: Explicit credentials (defaults to those in settings)
            settings: Settings for client library options
        """
        self.settings = settings or get_settings()
        self.credentials = credentials or Credentials.from_settings(self.settings)

    def validate(self) -> None:
        """
        Check that every credential is present and non-empty.

        Raises:
            MissingCredentialsError: Naming each missing setting
        """
        missing = [
            setting_name
            for field, setting_name in REQUIRED_FIELDS.items()
            if not (getattr(self.credentials, field) or "").strip()
        ]
        if missing:
            raise MissingCredentialsError(missing)

    def get_client_config(self) -> Dict[str, Any]:
        """
        Build the configuration dictionary for the Google Ads client.

        Returns:
            Dict containing Google Ads API configuration
        """
        return {
            "developer_token": self.credentials.developer_token,
            "client_id": self.credentials.client_id,
            "client_secret": self.credentials.client_secret,
            "refresh_token": self.credentials.refresh_token,
            "login_customer_id": self.credentials.customer_id,
            "use_proto_plus": self.settings.GOOGLE_ADWORDS_USE_PROTO_PLUS,
        }

    def build(self) -> GoogleAdsClient:
        """
        Create the Google Ads client.

        Returns:
            GoogleAdsClient instance

        Raises:
            MissingCredentialsError: If a credential is missing
            ConfigurationError: If the client library rejects the configuration
        """
        self.validate()
        set_google_ads_log_level(self.settings.GOOGLE_ADWORDS_API_LOG_LEVEL)

        try:
            client = GoogleAdsClient.load_from_dict(self.get_client_config())
        except Exception as e:
            logger.error(f"Failed to initialize Google Ads API client: {str(e)}")
            raise ConfigurationError(
                detail="Failed to initialize Google Ads API client",
                error=str(e),
            ) from e

        logger.info(f"Initialized Google Ads client for manager {self.credentials.customer_id}")
        return client


def build_session(
    credentials: Optional[Credentials] = None,
    settings: Optional[Settings] = None,
) -> GoogleAdsClient:
    """Shortcut for SessionBuilder(credentials, settings).build()."""
    return SessionBuilder(credentials=credentials, settings=settings).build()
