from typing import Tuple
from dataclasses import dataclass

# domain objects, immutable and scoped to a single request


@dataclass(frozen=True)
class Coordinate:
    latitude: float  # decimal degrees, WGS84
    longitude: float

    def is_valid(self) -> bool:
        return -90 <= self.latitude <= 90 and -180 <= self.longitude <= 180


@dataclass(frozen=True)
class ResolvedLocation:
    coordinate: Coordinate
    address: str

    @property
    def latitude(self) -> float:
        return self.coordinate.latitude

    @property
    def longitude(self) -> float:
        return self.coordinate.longitude


@dataclass(frozen=True)
class AutoLocation(ResolvedLocation):
    city: str = ""
    country: str = ""


@dataclass(frozen=True)
class JourneyEstimate:
    origin: ResolvedLocation
    destination: ResolvedLocation
    distance_km: float  # rounded to 2 decimals
    driving_time: str
    walking_time: str
    navigation_link: str
    safety_tips: Tuple[str, ...]
