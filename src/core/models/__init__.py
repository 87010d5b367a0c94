"""
Pydantic models for the court booking API.
"""

from core.models.booking import Booking, BookingCreate, BookingUpdate
from core.models.place import LatLng, PlaceDetails, PlaceSummary

__all__ = ["Booking", "BookingCreate", "BookingUpdate", "LatLng", "PlaceDetails", "PlaceSummary"]
