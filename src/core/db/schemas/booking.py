"""SQLAlchemy ORM model for the bookings table."""

from sqlalchemy import Index, Integer, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column

from core.db.schemas.base import Base


class BookingRecord(Base):
    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    place_id: Mapped[str] = mapped_column(Text, nullable=False)
    court_no: Mapped[int | None] = mapped_column(Integer)
    phone_no: Mapped[str | None] = mapped_column(Text)
    email: Mapped[str | None] = mapped_column(Text)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    start_time = mapped_column(TIMESTAMP(timezone=True))
    end_time = mapped_column(TIMESTAMP(timezone=True))

    __table_args__ = (Index("idx_bookings_user_id", "user_id"),)
