"""
Domain objects and pydantic request/response models
"""


from app.models.domain import (
    Coordinate,
    ResolvedLocation,
    AutoLocation,
    JourneyEstimate,
)
from app.models.requests import (
    AutoLocationRequest,
    LocationLookupRequest,
    DirectionsRequest,
)
from app.models.responses import (
    LocationResponse,
    AutoLocationResponse,
    DirectionsResponse,
    ToolInfo,
    ToolListResponse,
)

__all__ = [
    "Coordinate",
    "ResolvedLocation",
    "AutoLocation",
    "JourneyEstimate",
    "AutoLocationRequest",
    "LocationLookupRequest",
    "DirectionsRequest",
    "LocationResponse",
    "AutoLocationResponse",
    "DirectionsResponse",
    "ToolInfo",
    "ToolListResponse",
]
