"""
Keyword Volume Service.

Fetches search volume statistics for a list of keywords from the
KeywordPlanIdeaService and reshapes them into a report keyed by keyword.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from google_adwords.schemas.enums import (
    AttributeType,
    DEFAULT_ATTRIBUTE_TYPES,
    KeywordPlanNetwork,
    MONTHS,
)
from google_adwords.schemas.models import KeywordReportEntry
from google_adwords.schemas.responses import OperationResult
from google_adwords.services.base_service import BaseAdwordsService

logger = logging.getLogger(__name__)

MICROS_PER_UNIT = Decimal(1_000_000)
CENT = Decimal("0.01")
DEFAULT_PAGE_SIZE = 800
UNREPORTED_COMPETITION_LEVELS = ("UNSPECIFIED", "UNKNOWN")

AttributeLike = Union[str, AttributeType]


def micros_to_currency(amount_micros: Optional[int]) -> Decimal:
    """
    Convert a micro amount to a currency value with two decimals.

    Args:
        amount_micros: Amount in millionths of the currency unit

    Returns:
        Decimal rounded half-up to cents; 0 when the amount is missing or zero
    """
    if not amount_micros:
        return Decimal(0).quantize(CENT)
    return (Decimal(amount_micros) / MICROS_PER_UNIT).quantize(CENT, rounding=ROUND_HALF_UP)


def month_number(month: Any) -> int:
    """
    Month number (1-12) of a MonthOfYear enum member, name, or int.

    MonthOfYearEnum starts at UNSPECIFIED=0, UNKNOWN=1, JANUARY=2, so enum
    members are resolved by name rather than value.
    """
    name = getattr(month, "name", month)
    if isinstance(name, str) and name.upper() in MONTHS:
        return MONTHS.index(name.upper()) + 1
    number = int(month)
    if not 1 <= number <= 12:
        raise ValueError(f"Invalid month: {month!r}")
    return number


def year_month_key(year: Any, month: Any) -> str:
    """Format a year and month as YYYY-MM."""
    return f"{int(year):04d}-{month_number(month):02d}"


def normalize_attribute_types(
    attribute_types: Iterable[AttributeLike],
    competition: bool = False,
) -> List[AttributeType]:
    """
    Validate requested attributes and append COMPETITION when asked for.

    Returns a new list; the caller's sequence is left untouched.

    Raises:
        ValueError: For an unknown attribute name
    """
    normalized = []
    for attribute in attribute_types:
        raw = attribute.value if isinstance(attribute, AttributeType) else str(attribute).upper()
        try:
            value = AttributeType(raw)
        except ValueError:
            raise ValueError(f"Unknown attribute type: {attribute!r}") from None
        if value not in normalized:
            normalized.append(value)
    if competition and AttributeType.COMPETITION not in normalized:
        normalized.append(AttributeType.COMPETITION)
    return normalized


class KeywordVolumeService:
    """Builds keyword idea requests and shapes their results."""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        self.page_size = page_size

    def build_request(
        self,
        client,
        customer_id: str,
        keywords: Sequence[str],
        attribute_types: Sequence[AttributeType],
        location_codes: Sequence[int] = (),
    ):
        """
        Build a GenerateKeywordIdeasRequest for the first page of ideas.

        Args:
            client: GoogleAdsClient
            customer_id: Customer id without hyphens
            keywords: Seed keywords
            attribute_types: Normalized requested attributes
            location_codes: Geo target constant ids to restrict to

        Returns:
            The populated request
        """
        google_ads_service = client.get_service("GoogleAdsService")

        request = client.get_type("GenerateKeywordIdeasRequest")
        request.customer_id = customer_id
        request.page_size = self.page_size
        request.keyword_seed.keywords.extend(keywords)

        # Google Search only, no search partners or display network
        request.keyword_plan_network = getattr(
            client.enums.KeywordPlanNetworkEnum, KeywordPlanNetwork.GOOGLE_SEARCH.value
        )

        if location_codes:
            request.geo_target_constants.extend([
                google_ads_service.geo_target_constant_path(str(code))
                for code in location_codes
            ])

        if AttributeType.AVERAGE_CPC in attribute_types:
            request.historical_metrics_options.include_average_cpc = True

        return request

    def build_report(
        self,
        ideas: Iterable[Any],
        attribute_types: Sequence[AttributeType],
    ) -> Dict[str, KeywordReportEntry]:
        """
        Shape keyword ideas into a report keyed by keyword text.

        A keyword returned twice keeps one entry; later ideas overwrite the
        attributes of earlier ones. The competition level is reported whenever
        the idea carries a known one, whether or not COMPETITION was requested;
        UNSPECIFIED and UNKNOWN levels are left out.

        Args:
            ideas: GenerateKeywordIdeaResult items
            attribute_types: Normalized requested attributes

        Returns:
            Dict mapping keyword text to its KeywordReportEntry
        """
        rows: Dict[str, Dict[str, Any]] = {}

        for idea in ideas:
            keyword = idea.text
            metrics = idea.keyword_idea_metrics
            row = rows.setdefault(keyword, {})

            if AttributeType.SEARCH_VOLUME in attribute_types:
                row["search_volume"] = metrics.avg_monthly_searches or 0

            if AttributeType.AVERAGE_CPC in attribute_types:
                row["average_cpc"] = micros_to_currency(getattr(metrics, "average_cpc_micros", None))

            competition = getattr(metrics, "competition", None)
            if competition:
                level = getattr(competition, "name", str(competition))
                if level not in UNREPORTED_COMPETITION_LEVELS:
                    row["competition"] = level

            monthly_volumes = getattr(metrics, "monthly_search_volumes", None)
            if AttributeType.TARGETED_MONTHLY_SEARCHES in attribute_types and monthly_volumes:
                row["monthly_range"] = {
                    year_month_key(volume.year, volume.month): volume.monthly_searches
                    for volume in monthly_volumes
                }

        return {keyword: KeywordReportEntry(**row) for keyword, row in rows.items()}


class KeywordVolumeReporter(BaseAdwordsService):
    """Keyword search volume reports with rate limit retries."""

    def __init__(self, *args, page_size: int = DEFAULT_PAGE_SIZE, **kwargs):
        super().__init__(*args, **kwargs)
        self.keyword_volume_service = KeywordVolumeService(page_size=page_size)

    def collect_keyword_search_volume(
        self,
        keywords: Sequence[str],
        competition: bool = False,
        location_codes: Sequence[int] = (),
        attribute_types: Sequence[AttributeLike] = DEFAULT_ATTRIBUTE_TYPES,
    ) -> OperationResult:
        """
        Get search volume statistics for keywords.

        Only the first page of ideas is read (page_size, 800 by default);
        ideas past it are dropped.

        Args:
            keywords: Keyword phrases
            competition: Also request the competition level
            location_codes: Geo target constant ids to restrict results to
            attribute_types: Attributes to include in the report

        Returns:
            OperationResult whose data maps keyword text to KeywordReportEntry

        Raises:
            ValueError: For an unknown attribute type
        """
        requested = normalize_attribute_types(attribute_types, competition)
        keywords = list(keywords)
        location_codes = list(location_codes)

        def _fetch_report() -> Dict[str, KeywordReportEntry]:
            keyword_plan_idea_service = self.client.get_service("KeywordPlanIdeaService")
            request = self.keyword_volume_service.build_request(
                self.client, self.customer_id, keywords, requested, location_codes
            )
            response = keyword_plan_idea_service.generate_keyword_ideas(request=request)

            # First page only; iterating the pager would fetch the rest
            ideas = list(response.results)
            if not ideas:
                logger.warning("No keywords found.", extra={"operation": "collect_keyword_search_volume"})
                return {}

            report = self.keyword_volume_service.build_report(ideas, requested)
            logger.info(f"Retrieved search volume for {len(report)} keywords")
            return report

        return self._execute("collect_keyword_search_volume", _fetch_report)
