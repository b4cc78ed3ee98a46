from typing import Any, Dict, List
from pydantic import BaseModel, Field

from app.models.domain import AutoLocation, JourneyEstimate, ResolvedLocation

# response bodies


class LocationResponse(BaseModel):
    latitude: float = Field(..., description="Latitude (decimal degrees)")
    longitude: float = Field(..., description="Longitude (decimal degrees)")
    address: str = Field(..., description="Human-readable address")

    @classmethod
    def from_domain(cls, location: ResolvedLocation) -> "LocationResponse":
        return cls(
            latitude=location.latitude,
            longitude=location.longitude,
            address=location.address,
        )


class AutoLocationResponse(LocationResponse):
    city: str = Field(..., description="City")
    country: str = Field(..., description="Country")

    @classmethod
    def from_domain(cls, location: AutoLocation) -> "AutoLocationResponse":
        return cls(
            latitude=location.latitude,
            longitude=location.longitude,
            address=location.address,
            city=location.city,
            country=location.country,
        )


class DirectionsResponse(BaseModel):
    origin: str = Field(..., description="Resolved origin address")
    destination: str = Field(..., description="Resolved destination address")
    distance_km: float = Field(..., description="Straight-line distance (km)")
    driving_time: str = Field(..., description="Estimated driving time")
    walking_time: str = Field(..., description="Estimated walking time")
    navigation_link: str = Field(..., description="Google Maps directions link")
    safety_tips: List[str] = Field(default_factory=list, description="Safety tips")

    @classmethod
    def from_domain(cls, estimate: JourneyEstimate) -> "DirectionsResponse":
        return cls(
            origin=estimate.origin.address,
            destination=estimate.destination.address,
            distance_km=estimate.distance_km,
            driving_time=estimate.driving_time,
            walking_time=estimate.walking_time,
            navigation_link=estimate.navigation_link,
            safety_tips=list(estimate.safety_tips),
        )


class ToolInfo(BaseModel):
    id: str = Field(..., description="Tool id")
    description: str = Field(..., description="What the tool does")
    input_schema: Dict[str, Any] = Field(..., description="JSON schema of arguments")


class ToolListResponse(BaseModel):
    count: int = Field(..., description="Number of tools")
    tools: List[ToolInfo] = Field(default_factory=list)
