"""
Directions REST API endpoints
"""

from fastapi import APIRouter, HTTPException, Depends
from fastapi.responses import PlainTextResponse
import logging

from app.api.deps import get_location_service, to_http_exception
from app.core.exceptions import LocationAgentException
from app.models.domain import JourneyEstimate
from app.models.requests import DirectionsRequest
from app.models.responses import DirectionsResponse
from app.services.journey_summary import render_journey_summary
from app.services.location_service import LocationService


router = APIRouter()
logger = logging.getLogger(__name__)


async def _estimate(request: DirectionsRequest, service: LocationService) -> JourneyEstimate:
    try:
        logger.info(f"Directions: {request.origin} -> {request.destination}")
        return await service.get_directions(request.origin, request.destination)

    except LocationAgentException as e:
        logger.warning(f"Directions failed: {e.message}")
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        raise HTTPException(
            status_code=500, detail=f"Error while calculating directions: {str(e)}"
        )


@router.post("/directions", response_model=DirectionsResponse)
async def get_directions(
    request: DirectionsRequest,
    service: LocationService = Depends(get_location_service),
):
    """
    Straight-line distance, travel time, map link and safety tips

    - **origin**: starting address
    - **destination**: destination address

    Example:
        POST /v1/navigation/directions
        {
            "origin": "Ikeja",
            "destination": "Lekki"
        }
    """
    estimate = await _estimate(request, service)
    return DirectionsResponse.from_domain(estimate)


@router.post("/directions/summary", response_class=PlainTextResponse)
async def get_directions_summary(
    request: DirectionsRequest,
    service: LocationService = Depends(get_location_service),
):
    """Same as /directions, rendered as the assistant's plain-text layout"""
    estimate = await _estimate(request, service)
    return PlainTextResponse(render_journey_summary(estimate))
