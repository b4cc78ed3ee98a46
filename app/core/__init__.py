"""
Core settings and custom exceptions
"""

from app.core.config import settings

from app.core.exceptions import (
    LocationAgentException,
    LocationNotFoundException,
    InvalidLocationException,
    GeocodingServiceException,
    ToolNotFoundException,
)

__all__ = [
    "settings",
    "LocationAgentException",
    "LocationNotFoundException",
    "InvalidLocationException",
    "GeocodingServiceException",
    "ToolNotFoundException",
]
