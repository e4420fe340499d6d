"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from datetime import timedelta
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from google.ads.googleads.errors import GoogleAdsException

# Keep credentials from the developer's shell out of the tests
for key in list(os.environ):
    if key.upper().startswith("GOOGLE_ADWORDS_"):
        os.environ.pop(key, None)

from google_adwords.core.config import Settings, get_settings
from google_adwords.core.retry import RetryPolicy
from google_adwords.schemas.models import Credentials


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated)"
    )
    config.addinivalue_line(
        "markers", "slow: Slow running tests"
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test load settings from a clean environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# Settings Fixtures
# ============================================================================

@pytest.fixture
def test_settings():
    """Provide settings with a full set of fake credentials."""
    return Settings(
        _env_file=None,
        GOOGLE_ADWORDS_MANAGER_ID="123-456-7890",
        GOOGLE_ADWORDS_CLIENT_ID="client-id.apps.googleusercontent.com",
        GOOGLE_ADWORDS_CLIENT_SECRET="client-secret",
        GOOGLE_ADWORDS_REFRESH_TOKEN="refresh-token",
        GOOGLE_ADWORDS_DEVELOPER_TOKEN="developer-token",
        GOOGLE_ADWORDS_MAX_RETRIES=3,
    )


@pytest.fixture
def test_credentials(test_settings):
    """Provide credentials matching test_settings."""
    return Credentials.from_settings(test_settings)


# ============================================================================
# Retry Fixtures
# ============================================================================

class RecordingWait:
    """Stands in for Event.wait: records delays and never blocks."""

    def __init__(self, interrupted=False):
        self.delays = []
        self.interrupted = interrupted

    def __call__(self, delay):
        self.delays.append(delay)
        return self.interrupted


@pytest.fixture
def recording_wait():
    """Provide a wait callable that records requested delays."""
    return RecordingWait()


@pytest.fixture
def retry_policy(recording_wait):
    """Provide a retry policy that does not sleep."""
    return RetryPolicy(
        max_retries=3,
        default_retry_after=30.0,
        max_backoff=600.0,
        wait=recording_wait,
    )


# ============================================================================
# Google Ads Client Fixtures
# ============================================================================

class FakeGoogleAdsClient:
    """Minimal GoogleAdsClient double: services and request types are mocks."""

    def __init__(self):
        google_ads_service = MagicMock(name="GoogleAdsService")
        google_ads_service.geo_target_constant_path.side_effect = (
            lambda criterion_id: f"geoTargetConstants/{criterion_id}"
        )
        self.services = {
            "GoogleAdsService": google_ads_service,
            "KeywordPlanIdeaService": MagicMock(name="KeywordPlanIdeaService"),
            "GeoTargetConstantService": MagicMock(name="GeoTargetConstantService"),
        }
        self.types = {}
        self.enums = SimpleNamespace(
            KeywordPlanNetworkEnum=SimpleNamespace(
                GOOGLE_SEARCH="GOOGLE_SEARCH",
                GOOGLE_SEARCH_AND_PARTNERS="GOOGLE_SEARCH_AND_PARTNERS",
            )
        )

    def get_service(self, name):
        return self.services[name]

    def get_type(self, name):
        request = MagicMock(name=name)
        self.types.setdefault(name, []).append(request)
        return request


@pytest.fixture
def fake_client():
    """Provide a fake Google Ads client."""
    return FakeGoogleAdsClient()


# ============================================================================
# Sample Data Fixtures
# ============================================================================

def make_idea(text, searches=None, cpc_micros=None, competition=None, monthly=None):
    """Build a GenerateKeywordIdeaResult double."""
    return SimpleNamespace(
        text=text,
        keyword_idea_metrics=SimpleNamespace(
            avg_monthly_searches=searches,
            average_cpc_micros=cpc_micros,
            competition=SimpleNamespace(name=competition) if competition else None,
            monthly_search_volumes=[
                SimpleNamespace(year=year, month=month, monthly_searches=count)
                for year, month, count in (monthly or [])
            ],
        ),
    )


def make_geo(criterion_id, name, target_type="City", status="ENABLED"):
    """Build a GeoTargetConstant double."""
    return SimpleNamespace(
        id=criterion_id,
        name=name,
        target_type=target_type,
        status=SimpleNamespace(name=status),
    )


@pytest.fixture
def idea_factory():
    """Provide a keyword idea factory."""
    return make_idea


@pytest.fixture
def geo_factory():
    """Provide a geo target constant factory."""
    return make_geo


@pytest.fixture
def suggestions_response():
    """Wrap geo target constants in a SuggestGeoTargetConstantsResponse double."""
    def _build(*geos):
        return SimpleNamespace(
            geo_target_constant_suggestions=[
                SimpleNamespace(geo_target_constant=geo, reach=1000, locale="en")
                for geo in geos
            ]
        )
    return _build


# ============================================================================
# Google Ads Error Fixtures
# ============================================================================

def make_api_error(error_code, message="", retry_after=None):
    """Build a GoogleAdsError double; error_code is its text form."""
    details = SimpleNamespace(
        quota_error_details=SimpleNamespace(
            retry_delay=timedelta(seconds=retry_after) if retry_after is not None else None
        )
    )
    return SimpleNamespace(error_code=error_code, message=message, details=details)


def make_google_ads_exception(*errors):
    """Build a GoogleAdsException carrying the given errors."""
    failure = SimpleNamespace(errors=list(errors))
    return GoogleAdsException(None, None, failure, "request-id-1")


@pytest.fixture
def rate_limit_exception():
    """Factory for a rate limit GoogleAdsException."""
    def _build(retry_after=10):
        return make_google_ads_exception(
            make_api_error(
                "quota_error: RESOURCE_EXHAUSTED",
                message="Too many requests. Retry in 10 seconds.",
                retry_after=retry_after,
            )
        )
    return _build


@pytest.fixture
def api_exception():
    """Factory for a non rate limit GoogleAdsException."""
    def _build(error_code="authorization_error: USER_PERMISSION_DENIED", message="Permission denied"):
        return make_google_ads_exception(make_api_error(error_code, message=message))
    return _build


@pytest.fixture
def api_error_factory():
    """Provide the GoogleAdsError double factory."""
    return make_api_error


@pytest.fixture
def google_ads_exception_factory():
    """Provide the GoogleAdsException factory."""
    return make_google_ads_exception
