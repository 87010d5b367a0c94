"""
Custom exceptions and error handling for the court booking API.

Defines application-specific exceptions with error codes so that handlers
can map store and upstream failures onto consistent client responses.

Usage:
    from core.errors import BookingStoreError, ErrorCode

    raise BookingStoreError("Insert failed", code=ErrorCode.BOOKING_CREATE_FAILED)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Booking store errors
    BOOKING_CREATE_FAILED = "BOOKING_CREATE_FAILED"
    BOOKING_QUERY_FAILED = "BOOKING_QUERY_FAILED"
    BOOKING_UPDATE_FAILED = "BOOKING_UPDATE_FAILED"
    BOOKING_DELETE_FAILED = "BOOKING_DELETE_FAILED"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"

    # Lookup errors
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Places provider errors
    PLACES_SEARCH_FAILED = "PLACES_SEARCH_FAILED"
    PLACES_DETAILS_FAILED = "PLACES_DETAILS_FAILED"

    # Validation errors
    MISSING_QUERY = "MISSING_QUERY"
    MISSING_PLACE_ID = "MISSING_PLACE_ID"
    INVALID_REQUEST = "INVALID_REQUEST"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.BOOKING_CREATE_FAILED: "Failed to create booking. Please try again.",
    ErrorCode.BOOKING_QUERY_FAILED: "An error has occurred.",
    ErrorCode.BOOKING_UPDATE_FAILED: "Failed to update booking. Please try again.",
    ErrorCode.BOOKING_DELETE_FAILED: "Failed to delete booking. Please try again.",
    ErrorCode.STORE_UNAVAILABLE: "The booking store is not available. Please try again later.",
    ErrorCode.USER_NOT_FOUND: "User not found.",
    ErrorCode.PLACES_SEARCH_FAILED: "Failed to search places",
    ErrorCode.PLACES_DETAILS_FAILED: "Failed to get place details",
    ErrorCode.MISSING_QUERY: "Query parameter is required",
    ErrorCode.MISSING_PLACE_ID: "Place ID is required",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please check and try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class CourtBookingError(Exception):
    """Base exception for all court booking errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class BookingStoreError(CourtBookingError):
    """A statement against the bookings table failed."""

    pass


class PlacesApiError(CourtBookingError):
    """The places provider returned an error or could not be reached."""

    pass


class ValidationError(CourtBookingError):
    """A required request parameter is missing or malformed."""

    pass

