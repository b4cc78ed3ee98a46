"""
Distance, travel time and safety tip calculations
"""

from app.algorithms.distance_calculator import DistanceCalculator
from app.algorithms.travel_time import (
    estimate_driving_minutes,
    estimate_walking_minutes,
    format_travel_time,
)
from app.algorithms.safety_tips import generate_safety_tips, SAFETY_TIP_RULES

__all__ = [
    "DistanceCalculator",
    "estimate_driving_minutes",
    "estimate_walking_minutes",
    "format_travel_time",
    "generate_safety_tips",
    "SAFETY_TIP_RULES",
]
