"""Search router — AI hotel suggestions with booking links."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from luxia.dependencies import get_hotel_search_service
from luxia.schemas.search import ErrorResponse, HotelSearchRequest, HotelSearchResponse
from luxia.services.hotel_search_service import HotelSearchService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=None,
    responses={
        200: {"model": HotelSearchResponse},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def search_hotels(
    req: HotelSearchRequest,
    service: HotelSearchService = Depends(get_hotel_search_service),
):
    """Suggest 3 hotels for the destination and attach a booking link to each."""
    missing = req.missing_required()
    if missing:
        return JSONResponse(
            status_code=400,
            content={"error": f"Missing required fields: {', '.join(missing)}."},
        )

    hotels = await service.search(req)
    return {"hotels": hotels}
