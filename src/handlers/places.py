"""Places proxy routes — search and details via the places provider."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.errors import CourtBookingError, ValidationError
from core.services.places import PlacesClient
from handlers.deps import get_places

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/places", tags=["places"])


def _bad_request(error: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": error.user_message})


@router.get("/search")
async def search_places(query: str | None = None, places: PlacesClient = Depends(get_places)):
    logger.info("Search query received: %s", query)
    try:
        results = await places.search(query)
    except ValidationError as e:
        return _bad_request(e)
    except Exception as e:
        logger.exception("Search places error")
        detail = e.message if isinstance(e, CourtBookingError) else str(e)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": f"Failed to search places: {detail}"},
        )

    return {
        "success": True,
        "count": len(results),
        "places": [place.model_dump() for place in results],
    }


@router.get("/details")
@router.get("/details/")
async def place_details_without_id(places: PlacesClient = Depends(get_places)):
    return await place_details("", places)


@router.get("/details/{place_id}")
async def place_details(place_id: str, places: PlacesClient = Depends(get_places)):
    try:
        place = await places.get_details(place_id)
    except ValidationError as e:
        return _bad_request(e)
    except Exception:
        logger.exception("Get place details error for %s", place_id)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Failed to get place details"},
        )

    return {"success": True, "place": place.model_dump()}
