import math
from typing import Tuple

from app.core.config import EARTH_RADIUS_KM
from app.models.domain import Coordinate


class DistanceCalculator:
    EARTH_RADIUS = EARTH_RADIUS_KM  # km

    def calculate_distance(
        self, lat1: float, lon1: float, lat2: float, lon2: float
    ) -> float:
        """Great-circle distance between two points (km)"""
        return self.haversine((lat1, lon1), (lat2, lon2))

    def distance_between(self, origin: Coordinate, destination: Coordinate) -> float:
        return self.haversine(
            (origin.latitude, origin.longitude),
            (destination.latitude, destination.longitude),
        )

    def haversine(
        self, coord1: Tuple[float, float], coord2: Tuple[float, float]
    ) -> float:
        """Haversine formula over a spherical earth, unrounded"""
        lat1, lon1 = coord1
        lat2, lon2 = coord2

        # radian conversion
        lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])

        dlat = lat2 - lat1
        dlon = lon2 - lon1
        a = (
            math.sin(dlat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        )
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

        return self.EARTH_RADIUS * c
