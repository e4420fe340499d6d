"""
Parsing of GoogleAdsException failures.

Each GoogleAdsError carries an error_code message with exactly one field set,
whose text form reads "quota_error: RESOURCE_EXHAUSTED".
"""

import logging
from typing import List, Optional

from google.ads.googleads.errors import GoogleAdsException

from google_adwords.schemas.models import ApiErrorDetail

logger = logging.getLogger(__name__)

RATE_EXCEEDED_CODES = frozenset({
    "RESOURCE_EXHAUSTED",
    "RESOURCE_TEMPORARILY_EXHAUSTED",
    "RATE_EXCEEDED",
})


def _split_error_code(error_code) -> tuple:
    text = str(error_code).strip()
    kind, sep, code = text.partition(":")
    if not sep:
        return "unknown", text or "UNKNOWN"
    return kind.strip(), code.strip()


def _retry_after_seconds(error) -> Optional[float]:
    details = getattr(error, "details", None)
    quota_details = getattr(details, "quota_error_details", None)
    retry_delay = getattr(quota_details, "retry_delay", None)
    if retry_delay is None:
        return None
    # proto-plus maps Duration to timedelta
    if hasattr(retry_delay, "total_seconds"):
        seconds = retry_delay.total_seconds()
    else:
        seconds = float(getattr(retry_delay, "seconds", 0) or 0)
    return seconds or None


def parse_error(error) -> ApiErrorDetail:
    """
    Convert one GoogleAdsError into an ApiErrorDetail.

    Args:
        error: A GoogleAdsError from GoogleAdsException.failure.errors

    Returns:
        ApiErrorDetail for the error
    """
    kind, code = _split_error_code(error.error_code)
    return ApiErrorDetail(
        kind=kind,
        code=code,
        message=getattr(error, "message", "") or "",
        retry_after_seconds=_retry_after_seconds(error),
        is_rate_exceeded=code in RATE_EXCEEDED_CODES,
    )


def parse_google_ads_exception(ex: GoogleAdsException) -> List[ApiErrorDetail]:
    """
    Convert every sub-error of a GoogleAdsException.

    Args:
        ex: The exception raised by a Google Ads service call

    Returns:
        List of ApiErrorDetail, one per sub-error
    """
    failure = getattr(ex, "failure", None)
    errors = list(getattr(failure, "errors", None) or [])
    if not errors:
        return [ApiErrorDetail(kind="unknown", code="UNKNOWN", message=str(ex))]
    return [parse_error(error) for error in errors]


def rate_limit_retry_after(errors: List[ApiErrorDetail]) -> Optional[float]:
    """
    Largest retry-after among the rate limit errors.

    Returns:
        Seconds, or None when no rate limit error supplied one
    """
    delays = [
        e.retry_after_seconds
        for e in errors
        if e.is_rate_exceeded and e.retry_after_seconds
    ]
    return max(delays) if delays else None
