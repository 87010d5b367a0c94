"""
Business services for the court booking API.

- places.py: Google Places text search and details, reshaped for the frontend
- migration.py: programmatic Alembic upgrades for the bookings schema
"""

__all__: list[str] = []
