"""
Business logic services
"""

from app.services.journey_estimator import JourneyEstimator, build_navigation_link
from app.services.location_service import LocationService
from app.services.journey_summary import render_journey_summary

__all__ = [
    "JourneyEstimator",
    "build_navigation_link",
    "LocationService",
    "render_journey_summary",
]
