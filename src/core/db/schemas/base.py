"""
SQLAlchemy declarative base for the bookings schema.

Alembic reads Base.metadata; the runtime store issues plain SQL.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
