"""
Location REST API endpoints
"""

from typing import Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import get_location_service, to_http_exception
from app.core.exceptions import LocationAgentException
from app.models.responses import AutoLocationResponse, LocationResponse
from app.services.location_service import LocationService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/auto", response_model=AutoLocationResponse)
async def get_auto_location(
    service: LocationService = Depends(get_location_service),
):
    """
    Detect the caller's location from their public IP

    Falls back to the configured default location when the lookup fails,
    so this endpoint does not return lookup errors.
    """
    location = await service.resolve_by_ip()
    return AutoLocationResponse.from_domain(location)


@router.get("/geocode", response_model=LocationResponse)
async def geocode_address(
    address: Optional[str] = Query(
        None, max_length=200, description="Address or place name to geocode"
    ),
    service: LocationService = Depends(get_location_service),
):
    """
    Coordinates for an address

    - **address**: free-text address, the default query when omitted

    Example:
        GET /v1/location/geocode?address=Lekki
    """
    try:
        logger.info(f"Geocode request: address={address}")
        location = await service.resolve_by_address(address)
        return LocationResponse.from_domain(location)
    except LocationAgentException as e:
        logger.warning(f"Geocoding failed: {e.message}")
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Geocoding failed: {str(e)}")
