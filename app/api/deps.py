from functools import lru_cache

from fastapi import Depends, HTTPException, Request
from httpx import AsyncClient

from app.core.exceptions import LocationAgentException
from app.services.journey_estimator import JourneyEstimator
from app.services.location_service import LocationService


# the shared client is created in the application lifespan
def get_http_client(request: Request) -> AsyncClient:
    return request.app.state.http_client


# lru_cache => one estimator per process
@lru_cache()
def get_journey_estimator() -> JourneyEstimator:
    return JourneyEstimator()


def get_location_service(
    http_client: AsyncClient = Depends(get_http_client),
    estimator: JourneyEstimator = Depends(get_journey_estimator),
) -> LocationService:
    return LocationService(http_client, estimator=estimator)


def to_http_exception(e: LocationAgentException) -> HTTPException:
    return HTTPException(
        status_code=e.status_code, detail={"message": e.message, "code": e.code}
    )
