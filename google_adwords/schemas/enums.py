"""
Enums for Google Ads API parameters.

This module defines enumerations for the values the keyword and location
services send and recognize.
"""

from enum import Enum


class AttributeType(str, Enum):
    """Keyword idea attributes a report can request."""
    KEYWORD_TEXT = "KEYWORD_TEXT"
    SEARCH_VOLUME = "SEARCH_VOLUME"
    AVERAGE_CPC = "AVERAGE_CPC"
    COMPETITION = "COMPETITION"
    TARGETED_MONTHLY_SEARCHES = "TARGETED_MONTHLY_SEARCHES"


DEFAULT_ATTRIBUTE_TYPES = (
    AttributeType.KEYWORD_TEXT,
    AttributeType.SEARCH_VOLUME,
    AttributeType.AVERAGE_CPC,
)


class KeywordPlanNetwork(str, Enum):
    """Network for keyword planning."""
    GOOGLE_SEARCH = "GOOGLE_SEARCH"


class DisplayType(str, Enum):
    """Location granularities recognized by the location resolver."""
    CITY = "City"
    POSTAL_CODE = "Postal Code"
    STATE = "State"
    COUNTRY = "Country"

    @classmethod
    def values(cls):
        return [member.value for member in cls]


class GeoTargetStatus(str, Enum):
    """Geo target constant status values."""
    ENABLED = "ENABLED"


MONTHS = (
    "JANUARY",
    "FEBRUARY",
    "MARCH",
    "APRIL",
    "MAY",
    "JUNE",
    "JULY",
    "AUGUST",
    "SEPTEMBER",
    "OCTOBER",
    "NOVEMBER",
    "DECEMBER",
)
