"""
Custom exceptions for the google-adwords library.

Remote failures are normally reported through OperationResult; these
exceptions are raised for construction-time problems, cancelled retries,
and by OperationResult.unwrap().
"""
from typing import Any, Dict, List, Optional


class GoogleAdwordsException(Exception):
    """
    Base exception class for all google-adwords exceptions.
    """
    detail: str = "An unexpected error occurred"
    error_type: str = "adwords_error"

    def __init__(
        self,
        detail: Optional[str] = None,
        error_type: Optional[str] = None,
        **kwargs
    ):
        """
        Initialize the exception.

        Args:
            detail: Detailed error message
            error_type: Error type identifier
            **kwargs: Additional fields to include in to_dict()
        """
        self.detail = detail or self.detail
        self.error_type = error_type or self.error_type
        self.extra = kwargs
        super().__init__(self.detail)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the exception to a dictionary.

        Returns:
            Dict[str, Any]: Dictionary representation of the exception
        """
        error_dict = {
            "type": self.error_type,
            "detail": self.detail,
        }
        error_dict.update(self.extra)
        return error_dict


# Construction-time errors

class ConfigurationError(GoogleAdwordsException):
    """Exception for errors building the Google Ads session."""
    detail = "Invalid Google Ads configuration"
    error_type = "configuration_error"


class MissingCredentialsError(ConfigurationError):
    """Exception for missing credential settings."""
    detail = "Missing required Google Ads credentials"
    error_type = "missing_credentials"

    def __init__(self, missing: List[str], **kwargs):
        self.missing = list(missing)
        super().__init__(
            detail=(
                f"Missing required Google Ads credentials: {', '.join(self.missing)}. "
                f"Please set these in your .env file or environment variables."
            ),
            missing=self.missing,
            **kwargs
        )


# Remote service errors

class RemoteServiceError(GoogleAdwordsException):
    """Exception for errors returned by the Google Ads API."""
    detail = "Google Ads API request failed"
    error_type = "remote_service_error"


class RateLimitExceededError(RemoteServiceError):
    """Exception for rate limit errors that outlived every retry."""
    detail = "Google Ads API rate limit exceeded"
    error_type = "rate_limit_exceeded"


class RetryCancelledError(GoogleAdwordsException):
    """Exception raised when a pending rate limit backoff is cancelled."""
    detail = "Retry cancelled"
    error_type = "retry_cancelled"
