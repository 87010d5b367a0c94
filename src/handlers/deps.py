"""FastAPI dependencies resolving the per-app store, places client and principal."""

from fastapi import Request

from core.auth import Principal
from core.db import BookingStore
from core.services.places import PlacesClient


def get_store(request: Request) -> BookingStore:
    return request.app.state.store


def get_places(request: Request) -> PlacesClient:
    return request.app.state.places


async def current_principal(request: Request) -> Principal:
    return await request.app.state.principals.resolve(request)
