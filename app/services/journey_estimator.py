import logging
from typing import Optional
from urllib.parse import quote

from app.algorithms.distance_calculator import DistanceCalculator
from app.algorithms.safety_tips import generate_safety_tips
from app.algorithms.travel_time import (
    estimate_driving_minutes,
    estimate_walking_minutes,
    format_travel_time,
)
from app.core.config import NAVIGATION_LINK_BASE, NAVIGATION_TRAVEL_MODE
from app.core.exceptions import InvalidLocationException
from app.models.domain import Coordinate, JourneyEstimate, ResolvedLocation

logger = logging.getLogger(__name__)

# same unreserved set as javascript encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_navigation_link(origin: str, destination: str) -> str:
    """Google Maps directions link for two address strings"""
    return (
        f"{NAVIGATION_LINK_BASE}?api=1"
        f"&origin={encode_uri_component(origin)}"
        f"&destination={encode_uri_component(destination)}"
        f"&travelmode={NAVIGATION_TRAVEL_MODE}"
    )


class JourneyEstimator:
    """Straight-line distance and rough travel time between two points"""

    def __init__(self, distance_calc: Optional[DistanceCalculator] = None):
        self.distance_calc = distance_calc or DistanceCalculator()

    def estimate_journey(
        self,
        origin: Coordinate,
        destination: Coordinate,
        origin_label: str,
        destination_label: str,
        link_origin: Optional[str] = None,
        link_destination: Optional[str] = None,
        current_hour: Optional[int] = None,
    ) -> JourneyEstimate:
        """
        Build a journey estimate

        Args:
            origin: origin coordinate
            destination: destination coordinate
            origin_label: address shown for the origin
            destination_label: address shown for the destination
            link_origin: text placed in the navigation link (defaults to origin_label)
            link_destination: text placed in the navigation link (defaults to destination_label)
            current_hour: hour used for night travel tips (defaults to local clock)

        Returns:
            JourneyEstimate

        Raises:
            InvalidLocationException: coordinate out of range
        """
        for point in (origin, destination):
            if not point.is_valid():
                raise InvalidLocationException(
                    f"Invalid coordinates: {point.latitude}, {point.longitude}"
                )

        # unrounded distance drives the time estimates and tip tiers
        distance = self.distance_calc.distance_between(origin, destination)

        driving_minutes = estimate_driving_minutes(distance)
        walking_minutes = estimate_walking_minutes(distance)

        navigation_link = build_navigation_link(
            link_origin if link_origin is not None else origin_label,
            link_destination if link_destination is not None else destination_label,
        )

        safety_tips = generate_safety_tips(
            distance, driving_minutes, current_hour=current_hour
        )

        logger.debug(
            f"Journey estimate: {origin_label} -> {destination_label}, "
            f"distance={distance:.3f}km, driving={driving_minutes}m, walking={walking_minutes}m"
        )

        return JourneyEstimate(
            origin=ResolvedLocation(coordinate=origin, address=origin_label),
            destination=ResolvedLocation(
                coordinate=destination, address=destination_label
            ),
            distance_km=round(distance, 2),
            driving_time=format_travel_time(driving_minutes),
            walking_time=format_travel_time(walking_minutes),
            navigation_link=navigation_link,
            safety_tips=tuple(safety_tips),
        )
