"""
Database ORM models and clients for the court booking API.

Importing this package registers all models on Base.metadata,
which Alembic needs for autogenerate.
"""

from core.db.schemas.base import Base
from core.db.schemas.booking import BookingRecord
from core.db.store import BookingStore

__all__ = ["Base", "BookingRecord", "BookingStore"]
