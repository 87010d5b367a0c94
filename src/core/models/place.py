"""Pydantic models for places returned by the places provider."""

from pydantic import BaseModel


class LatLng(BaseModel):
    latitude: float
    longitude: float


class PlaceSummary(BaseModel):
    place_id: str | None
    name: str = "Unknown"
    address: str = "Address not available"
    phone: str = "Phone not available"
    rating: float = 0
    photos: list[str] = []


class PlaceDetails(PlaceSummary):
    international_phone: str | None = None
    rating_count: int = 0
    business_status: str = "UNKNOWN"
    price_level: str | int | None = None
    location: LatLng | None = None
