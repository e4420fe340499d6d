"""
Location Service.

Resolves free-text location names to Google Ads geo target constant ids via
GeoTargetConstantService.suggest_geo_target_constants.
"""
import logging
from typing import Any, Dict, Iterable, List, Sequence

from google_adwords.schemas.enums import DisplayType, GeoTargetStatus
from google_adwords.schemas.responses import OperationResult
from google_adwords.services.base_service import BaseAdwordsService

logger = logging.getLogger(__name__)

LocationResult = Dict[str, Dict[str, int]]


def _status_name(status: Any) -> str:
    return str(getattr(status, "name", status))


def _find_matching_name(location_name: str, names: List[str]):
    canonical = location_name.lower()
    for name in names:
        for word in name.split(" "):
            if word and word.lower() in canonical:
                return name
    return None


def match_location_names(candidates: Iterable[Any], names: Sequence[str]) -> LocationResult:
    """
    Match geo target constants to the requested location names.

    A candidate is kept when it is enabled, its display type is one of City,
    Postal Code, State or Country, its name is not already recorded for that
    display type, and some word of a still unmatched input name is a
    case-insensitive substring of its name. The first such input name wins and
    neither it nor any repeat of it is considered again.

    Args:
        candidates: GeoTargetConstant objects (id, name, target_type, status)
        names: Requested location names

    Returns:
        Dict mapping display type to {location name: geo target id}
    """
    remaining = [name.lower() for name in names]
    results: LocationResult = {}
    display_types = DisplayType.values()

    for geo in candidates:
        if _status_name(geo.status) != GeoTargetStatus.ENABLED.value:
            continue

        location_name = geo.name
        display_type = geo.target_type

        if location_name in results.get(display_type, {}):
            continue

        if display_type not in display_types:
            continue

        matched = _find_matching_name(location_name, remaining)
        if matched is None:
            continue

        results.setdefault(display_type, {})[location_name] = int(geo.id)
        remaining = [name for name in remaining if name != matched]
        logger.debug(f"Matched '{matched}' to {display_type} '{location_name}' ({geo.id})")

    return results


class LocationResolver(BaseAdwordsService):
    """Location name to geo target id lookups with rate limit retries."""

    def get_location_id(
        self,
        locations: Sequence[str],
        location_type: str = DisplayType.CITY.value,
        locale: str = "en",
    ) -> OperationResult:
        """
        Look up geo target ids for location names.

        Args:
            locations: Location names, matched case-insensitively
            location_type: One of City, Postal Code, State, Country. Accepted
                for compatibility; results are not filtered by it.
            locale: Locale the names are written in

        Returns:
            OperationResult whose data maps display type to {name: id}
        """
        names = [location.lower() for location in locations]

        def _fetch_locations() -> LocationResult:
            geo_target_constant_service = self.client.get_service("GeoTargetConstantService")

            request = self.client.get_type("SuggestGeoTargetConstantsRequest")
            request.locale = locale
            request.location_names.names.extend(names)

            response = geo_target_constant_service.suggest_geo_target_constants(request=request)
            candidates = [
                suggestion.geo_target_constant
                for suggestion in response.geo_target_constant_suggestions
            ]
            logger.info(f"Received {len(candidates)} location suggestions for {len(names)} names")
            return match_location_names(candidates, names)

        return self._execute("get_location_id", _fetch_locations)
