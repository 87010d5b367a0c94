"""Booking routes — CRUD over the bookings table."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from core.auth import Principal
from core.db import BookingStore
from core.errors import USER_MESSAGES, CourtBookingError, ErrorCode
from core.models import BookingCreate, BookingUpdate
from handlers.deps import current_principal, get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["bookings"])


def _error_detail(error: Exception) -> str:
    if isinstance(error, CourtBookingError):
        return error.message
    return USER_MESSAGES[ErrorCode.INTERNAL_ERROR]


def _query_failed() -> PlainTextResponse:
    return PlainTextResponse(USER_MESSAGES[ErrorCode.BOOKING_QUERY_FAILED], status_code=500)


@router.post("/bookings")
async def create_booking(
    body: BookingCreate | None = None,
    store: BookingStore = Depends(get_store),
    principal: Principal = Depends(current_principal),
):
    body = body or BookingCreate()
    try:
        booking_id = await store.create(body, user_id=principal.user_id)
    except Exception:
        logger.exception("Failed to create booking")
        return JSONResponse(
            status_code=500,
            content={"error": USER_MESSAGES[ErrorCode.BOOKING_CREATE_FAILED]},
        )

    logger.info("Booking created with id %d", booking_id)
    return {
        "status": "Success",
        "data": {**body.echo(), "user_id": principal.user_id, "id": booking_id},
        "message": "Bookings created",
    }


@router.get("/bookings")
async def list_bookings(store: BookingStore = Depends(get_store)):
    """All bookings, unfiltered. Intended for admin use."""
    try:
        bookings = await store.list_all()
    except Exception:
        logger.exception("Failed to list bookings")
        return _query_failed()

    logger.info("Retrieved all bookings (%d)", len(bookings))
    return [booking.model_dump(mode="json") for booking in bookings]


@router.get("/users/{user_id}/bookings")
async def list_user_bookings(user_id: int, store: BookingStore = Depends(get_store)):
    try:
        bookings = await store.list_by_user(user_id)
    except Exception:
        logger.exception("Failed to list bookings for user %d", user_id)
        return _query_failed()

    # An empty result is reported as an unknown user.
    if not bookings:
        return JSONResponse(status_code=404, content={"message": USER_MESSAGES[ErrorCode.USER_NOT_FOUND]})

    return {
        "status": "Success",
        "data": [booking.model_dump(mode="json") for booking in bookings],
        "message": f"Here are the bookings by user {user_id}.",
    }


@router.put("/bookings/{booking_id}")
async def update_booking(
    booking_id: int,
    body: BookingUpdate | None = None,
    store: BookingStore = Depends(get_store),
):
    body = body or BookingUpdate()
    try:
        updated = await store.update(booking_id, body)
    except Exception as e:
        logger.exception("Failed to update booking %d", booking_id)
        return JSONResponse(status_code=500, content={"error": _error_detail(e)})

    logger.info("Update of booking %d touched %d row(s)", booking_id, updated)
    return {"status": "success", "message": "Booking updated successfully"}


@router.delete("/bookings/{booking_id}")
async def delete_booking(booking_id: int, store: BookingStore = Depends(get_store)):
    try:
        deleted = await store.delete(booking_id)
    except Exception as e:
        logger.exception("Failed to delete booking %d", booking_id)
        return JSONResponse(status_code=500, content={"error": _error_detail(e)})

    logger.info("Deleted booking %d (%d row(s))", booking_id, deleted)
    return {"status": "success", "message": "Booking deleted successfully."}
