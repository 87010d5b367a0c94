"""Places API client — text search and place details, reshaped for the frontend."""

import logging
from typing import Any

import httpx
import pydantic

from core.config import Config
from core.errors import ErrorCode, PlacesApiError, ValidationError
from core.models.place import LatLng, PlaceDetails, PlaceSummary

logger = logging.getLogger(__name__)

MAX_SEARCH_RESULTS = 10

SEARCH_FIELD_MASK = ",".join(
    f"places.{field}"
    for field in ("id", "displayName", "formattedAddress", "nationalPhoneNumber", "rating", "photos")
)

DETAILS_FIELDS = [
    "id",
    "displayName",
    "formattedAddress",
    "nationalPhoneNumber",
    "internationalPhoneNumber",
    "rating",
    "userRatingCount",
    "photos",
    "businessStatus",
    "priceLevel",
    "location",
]


def build_photo_url(
    photo_name: str | None,
    api_key: str,
    max_width_px: int = 400,
    base_url: str = "https://places.googleapis.com/v1",
) -> str | None:
    """Resolve a photo resource name (``places/<id>/photos/<ref>``) to a media URL."""
    if not photo_name or not photo_name.strip():
        return None
    return f"{base_url.rstrip('/')}/{photo_name.strip('/')}/media?maxWidthPx={max_width_px}&key={api_key}"


class PlacesClient:
    def __init__(self, config: Config, http_client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient()

    def _headers(self, field_mask: str) -> dict[str, str]:
        return {
            "X-Goog-Api-Key": self._config.places_api_key,
            "X-Goog-FieldMask": field_mask,
        }

    def _photo_urls(self, place: dict[str, Any]) -> list[str]:
        urls = (
            build_photo_url(
                photo.get("name") if isinstance(photo, dict) else None,
                self._config.places_api_key,
                self._config.photo_max_width_px,
                self._config.places_base_url,
            )
            for photo in place.get("photos") or []
        )
        return [url for url in urls if url]

    async def _request(self, method: str, url: str, code: ErrorCode, **kwargs: Any) -> dict[str, Any]:
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise PlacesApiError(f"Places request failed: {e}", code=code) from e

        if response.is_error:
            logger.error("Places API error response (%d): %s", response.status_code, response.text)
            raise PlacesApiError(f"Google API error: {response.status_code}", code=code)

        try:
            return response.json()
        except ValueError as e:
            raise PlacesApiError(f"Invalid JSON from Places API: {e}", code=code) from e

    async def search(self, query: str | None, max_results: int = MAX_SEARCH_RESULTS) -> list[PlaceSummary]:
        if not query:
            raise ValidationError("Missing search query", code=ErrorCode.MISSING_QUERY)

        data = await self._request(
            "POST",
            f"{self._config.places_base_url}/places:searchText",
            ErrorCode.PLACES_SEARCH_FAILED,
            json={"textQuery": query, "maxResultCount": max_results},
            headers=self._headers(SEARCH_FIELD_MASK),
        )
        return [self._to_summary(place) for place in data.get("places") or []]

    async def get_details(self, place_id: str | None) -> PlaceDetails:
        if not place_id or not place_id.strip():
            raise ValidationError("Missing place id", code=ErrorCode.MISSING_PLACE_ID)

        url = f"{self._config.places_base_url}/places/{place_id}"
        logger.info("Fetching place details for %s", place_id)
        place = await self._request(
            "GET",
            url,
            ErrorCode.PLACES_DETAILS_FAILED,
            headers=self._headers(",".join(DETAILS_FIELDS)),
        )
        return self._to_details(place)

    def _to_summary(self, place: dict[str, Any]) -> PlaceSummary:
        return PlaceSummary(
            place_id=place.get("id"),
            name=(place.get("displayName") or {}).get("text") or "Unknown",
            address=place.get("formattedAddress") or "Address not available",
            phone=place.get("nationalPhoneNumber") or "Phone not available",
            rating=place.get("rating") or 0,
            photos=self._photo_urls(place),
        )

    def _location(self, place: dict[str, Any]) -> LatLng | None:
        location = place.get("location")
        if not location:
            return None
        try:
            return LatLng.model_validate(location)
        except pydantic.ValidationError:
            logger.warning("Dropping malformed location for place %s: %r", place.get("id"), location)
            return None

    def _to_details(self, place: dict[str, Any]) -> PlaceDetails:
        return PlaceDetails(
            **self._to_summary(place).model_dump(),
            international_phone=place.get("internationalPhoneNumber") or None,
            rating_count=place.get("userRatingCount") or 0,
            business_status=place.get("businessStatus") or "UNKNOWN",
            price_level=place.get("priceLevel") or None,
            location=self._location(place),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()
