#!/usr/bin/env python3
"""Create the bookings table for local development.

This script creates the bookings table (and its user_id index) directly from
the SQLAlchemy schema, against the database in BOOKINGS_DATABASE. Deployed
databases are migrated with Alembic instead.

Usage:
    python scripts/create_local_tables.py [--drop]
"""

import sys
from pathlib import Path

from sqlalchemy import create_engine, inspect

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_config
from core.db import Base, BookingRecord
from core.services.migration import sqlalchemy_url


def create_bookings_table(engine, drop: bool = False):
    """Create the bookings table, optionally dropping it first."""
    table = BookingRecord.__table__
    if drop:
        table.drop(engine, checkfirst=True)
        print("✓ Dropped bookings table")

    if inspect(engine).has_table(table.name):
        print("✓ bookings table already exists")
        return

    Base.metadata.create_all(engine, tables=[table])
    print("✓ Created bookings table")


def main():
    """Create all local tables."""
    config = get_config()
    url = sqlalchemy_url(config.database_url)

    print(f"Creating tables at {engine_host(url)}...")
    print()

    engine = create_engine(url, connect_args={"sslmode": config.db_sslmode})
    try:
        create_bookings_table(engine, drop="--drop" in sys.argv[1:])
    finally:
        engine.dispose()

    print()
    print("✅ All tables ready")


def engine_host(url: str) -> str:
    """Strip credentials from a database URL before printing it."""
    return url.rsplit("@", 1)[-1]


if __name__ == "__main__":
    main()
