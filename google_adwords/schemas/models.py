"""
Pydantic models for the Google Ads keyword and location operations.
"""

import json
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """The five values a Google Ads session is built from."""
    model_config = ConfigDict(frozen=True)

    manager_id: Optional[str] = Field(None, description="Manager (MCC) customer id")
    client_id: Optional[str] = Field(None, description="OAuth client id")
    client_secret: Optional[str] = Field(None, description="OAuth client secret")
    refresh_token: Optional[str] = Field(None, description="OAuth refresh token")
    developer_token: Optional[str] = Field(None, description="Google Ads developer token")

    @classmethod
    def from_settings(cls, settings) -> "Credentials":
        return cls(
            manager_id=settings.GOOGLE_ADWORDS_MANAGER_ID,
            client_id=settings.GOOGLE_ADWORDS_CLIENT_ID,
            client_secret=settings.GOOGLE_ADWORDS_CLIENT_SECRET,
            refresh_token=settings.GOOGLE_ADWORDS_REFRESH_TOKEN,
            developer_token=settings.GOOGLE_ADWORDS_DEVELOPER_TOKEN,
        )

    @property
    def customer_id(self) -> str:
        """Manager id without hyphens, as the API expects it."""
        return (self.manager_id or "").replace("-", "")


class KeywordReportEntry(BaseModel):
    """
    Statistics for one keyword.

    Fields that were not requested stay None and are left out of to_dict().
    """
    search_volume: Optional[int] = Field(None, ge=0, description="Average monthly searches")
    average_cpc: Optional[Decimal] = Field(None, description="Average cost per click, 2 decimals")
    competition: Optional[str] = Field(None, description="Competition level (LOW, MEDIUM, HIGH)")
    monthly_range: Optional[Dict[str, int]] = Field(
        None, description="Searches per month keyed by YYYY-MM"
    )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ApiErrorDetail(BaseModel):
    """One sub-error of a failed Google Ads API call."""
    kind: str = Field(..., description="Error code category, e.g. quota_error")
    code: str = Field(..., description="Error code name, e.g. RESOURCE_EXHAUSTED")
    message: str = Field("", description="Message returned by the API")
    retry_after_seconds: Optional[float] = Field(
        None, description="Provider supplied retry delay"
    )
    is_rate_exceeded: bool = Field(False, description="Whether the error is a rate limit")

    def to_json(self) -> str:
        return json.dumps(self.model_dump())
