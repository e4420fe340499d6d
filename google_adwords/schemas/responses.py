"""
Result envelope returned by the Google Ads operations.

A call either succeeds with data (possibly empty) or fails with the API
errors that stopped it, so callers can tell "no results" from "failed".
"""
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

from google_adwords.core.exceptions import RateLimitExceededError, RemoteServiceError
from google_adwords.schemas.models import ApiErrorDetail

T = TypeVar("T")


class OperationResult(BaseModel, Generic[T]):
    """Outcome of one Google Ads operation, retries included."""
    success: bool = Field(..., description="Whether the operation returned data")
    data: Optional[T] = Field(None, description="The operation's data on success")
    errors: List[ApiErrorDetail] = Field(default_factory=list, description="API errors on failure")
    attempts: int = Field(1, ge=1, description="Remote calls made, retries included")
    rate_limited: bool = Field(False, description="Failed because retries ran out")

    @classmethod
    def ok(cls, data: T, attempts: int = 1) -> "OperationResult[T]":
        return cls(success=True, data=data, attempts=attempts)

    @classmethod
    def failure(
        cls,
        errors: List[ApiErrorDetail],
        attempts: int = 1,
        rate_limited: bool = False,
    ) -> "OperationResult[T]":
        return cls(success=False, errors=errors, attempts=attempts, rate_limited=rate_limited)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """
        Return the data or raise the error that stopped the operation.

        Raises:
            RateLimitExceededError: If retries ran out on rate limit errors
            RemoteServiceError: For any other API failure
        """
        if self.success:
            return self.data
        details = [error.model_dump() for error in self.errors]
        if self.rate_limited:
            raise RateLimitExceededError(errors=details, attempts=self.attempts)
        messages = "; ".join(f"{e.kind}.{e.code}: {e.message}" for e in self.errors)
        raise RemoteServiceError(
            detail=f"Google Ads API request failed: {messages}" if messages else None,
            errors=details,
            attempts=self.attempts,
        )
