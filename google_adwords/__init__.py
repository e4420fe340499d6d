"""
Google Ads keyword search volume and location id lookups.

    from google_adwords import GoogleAdwords

    adwords = GoogleAdwords()
    report = adwords.collect_keyword_search_volume(["running shoes"]).unwrap()
"""

from .__version__ import __version__
from .client import GoogleAdwords, get_google_adwords
from .core.exceptions import (
    GoogleAdwordsException,
    ConfigurationError,
    MissingCredentialsError,
    RemoteServiceError,
    RateLimitExceededError,
    RetryCancelledError,
)
from .core.logging_config import configure_logging, setup_structured_logging
from .core.retry import RetryPolicy
from .schemas.enums import AttributeType, DisplayType
from .schemas.models import Credentials, KeywordReportEntry, ApiErrorDetail
from .schemas.responses import OperationResult

__all__ = [
    "__version__",
    "GoogleAdwords",
    "get_google_adwords",
    "GoogleAdwordsException",
    "ConfigurationError",
    "MissingCredentialsError",
    "RemoteServiceError",
    "RateLimitExceededError",
    "RetryCancelledError",
    "configure_logging",
    "setup_structured_logging",
    "RetryPolicy",
    "AttributeType",
    "DisplayType",
    "Credentials",
    "KeywordReportEntry",
    "ApiErrorDetail",
    "OperationResult",
]
