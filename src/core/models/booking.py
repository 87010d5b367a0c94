from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, model_validator

_ECHOED_AS_SUBMITTED = ("start_time", "end_time")


class BookingCreate(BaseModel):
    """Body of a create-booking request.

    Every field is optional; the table's NOT NULL constraints decide what is
    required, so an absent ``place_id`` reaches the INSERT as NULL.
    Any ``user_id`` in the body is ignored. Contact fields are unvalidated
    text, so numbers are accepted and kept as strings.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    place_id: str | None = None
    court_no: int | None = None
    phone_no: str | None = None
    email: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None

    _submitted: dict[str, Any] = PrivateAttr(default_factory=dict)

    @model_validator(mode="wrap")
    @classmethod
    def _keep_submitted_times(cls, data: Any, handler: Any) -> "BookingCreate":
        booking = handler(data)
        if isinstance(data, dict):
            booking._submitted = {k: data[k] for k in _ECHOED_AS_SUBMITTED if data.get(k) is not None}
        return booking

    def echo(self) -> dict[str, Any]:
        """JSON-ready fields, with the timestamps exactly as the client sent them."""
        return {**self.model_dump(mode="json"), **self._submitted}


class BookingUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    court_no: int | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None


class Booking(BaseModel):
    id: int
    place_id: str | None
    court_no: int | None
    phone_no: str | None
    email: str | None
    user_id: int
    start_time: datetime | None
    end_time: datetime | None
