"""
HTTP entrypoint for the court booking API.

Builds the FastAPI app, wires CORS and the routers, and owns the lifecycle
of the booking store and places client. The module-level ``app`` is what a
managed host imports; ``main()`` runs a local listener.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.auth import PrincipalProvider, get_principal_provider
from core.config import Config, get_config
from core.db import BookingStore
from core.errors import USER_MESSAGES, BookingStoreError, ErrorCode
from core.services.places import PlacesClient
from handlers import bookings, places as places_routes

load_dotenv()

logger = logging.getLogger(__name__)

SERVICE_NAME = "Sport Facility API"
API_VERSION = "1.0.0"


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": USER_MESSAGES[ErrorCode.INVALID_REQUEST],
            "details": jsonable_encoder(exc.errors()),
        },
    )


def create_app(
    config: Config | None = None,
    store: BookingStore | None = None,
    places: PlacesClient | None = None,
    principals: PrincipalProvider | None = None,
) -> FastAPI:
    config = config or get_config()
    store = store or BookingStore(config, open_on_demand=True)
    places = places or PlacesClient(config)
    principals = principals or get_principal_provider(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await store.open()
        try:
            logger.info("Database connected: %s", await store.server_version())
        except BookingStoreError:
            logger.exception("Database connection error")
        if not config.places_api_key:
            logger.warning("Places API key is missing; place lookups will fail")
        try:
            yield
        finally:
            await places.aclose()
            await store.close()

    app = FastAPI(title=SERVICE_NAME, version=API_VERSION, lifespan=lifespan)
    app.state.config = config
    app.state.store = store
    app.state.places = places
    app.state.principals = principals

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.include_router(places_routes.router)
    app.include_router(bookings.router)

    @app.get("/")
    async def root():
        return {
            "message": SERVICE_NAME,
            "version": API_VERSION,
            "endpoints": {
                "places": "/api/places",
                "bookings": "/bookings",
            },
        }

    return app


app = create_app()


def main() -> None:
    config = get_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    if config.is_production:
        logger.info("Production environment; local listener disabled")
        return
    logger.info("Server is running on port %d", config.port)
    uvicorn.run(app, host="0.0.0.0", port=config.port)


if __name__ == "__main__":
    main()
