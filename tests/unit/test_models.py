from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from core.models import Booking, BookingCreate, BookingUpdate, PlaceDetails, PlaceSummary

VALID_CREATE = dict(
    place_id="ChIJN1t_tDeuEmsRUsoyG83frY4",
    court_no=3,
    phone_no="+60 12-345 6789",
    email="player@example.com",
    start_time="2026-11-01T10:00:00+08:00",
    end_time="2026-11-01T11:00:00+08:00",
)


# --- BookingCreate ---


def test_booking_create_valid():
    b = BookingCreate(**VALID_CREATE)
    assert b.court_no == 3
    assert b.start_time == datetime(2026, 11, 1, 10, tzinfo=timezone(timedelta(hours=8)))


def test_booking_create_ignores_user_id():
    b = BookingCreate(**VALID_CREATE, user_id=99)
    assert "user_id" not in b.model_dump()


def test_booking_create_all_fields_optional():
    b = BookingCreate()
    assert b.model_dump() == {
        "place_id": None,
        "court_no": None,
        "phone_no": None,
        "email": None,
        "start_time": None,
        "end_time": None,
    }


def test_booking_create_rejects_non_numeric_court():
    with pytest.raises(ValidationError):
        BookingCreate(**{**VALID_CREATE, "court_no": "abc"})


def test_booking_create_rejects_bad_timestamp():
    with pytest.raises(ValidationError):
        BookingCreate(**{**VALID_CREATE, "start_time": "next tuesday"})


def test_booking_create_does_not_check_time_order():
    b = BookingCreate(**{**VALID_CREATE, "start_time": VALID_CREATE["end_time"], "end_time": VALID_CREATE["start_time"]})
    assert b.start_time > b.end_time


# --- BookingUpdate ---


def test_booking_update_keeps_only_mutable_fields():
    u = BookingUpdate(**VALID_CREATE)
    assert set(u.model_dump()) == {"court_no", "start_time", "end_time"}


# --- Booking ---


def test_booking_row_requires_id_and_user():
    with pytest.raises(ValidationError):
        Booking(**{**VALID_CREATE})


def test_booking_create_echo_keeps_submitted_times():
    b = BookingCreate(**{**VALID_CREATE, "start_time": "2026-11-01T10:00:00.000Z"})
    echoed = b.echo()
    assert echoed["start_time"] == "2026-11-01T10:00:00.000Z"
    assert echoed["end_time"] == "2026-11-01T11:00:00+08:00"
    assert echoed["place_id"] == VALID_CREATE["place_id"]
    assert b.start_time == datetime(2026, 11, 1, 10, tzinfo=timezone.utc)


def test_booking_create_echo_without_times():
    assert BookingCreate(court_no=2).echo()["start_time"] is None


def test_booking_create_accepts_numeric_phone():
    assert BookingCreate(phone_no=60123456789).phone_no == "60123456789"


# --- Places ---


def test_place_summary_defaults():
    p = PlaceSummary(place_id="abc")
    assert p.name == "Unknown"
    assert p.address == "Address not available"
    assert p.phone == "Phone not available"
    assert p.rating == 0
    assert p.photos == []


def test_place_details_defaults():
    p = PlaceDetails(place_id="abc")
    assert p.international_phone is None
    assert p.rating_count == 0
    assert p.business_status == "UNKNOWN"
    assert p.price_level is None
    assert p.location is None


def test_place_photo_lists_are_not_shared():
    a = PlaceSummary(place_id="a")
    b = PlaceSummary(place_id="b")
    a.photos.append("x")
    assert b.photos == []
