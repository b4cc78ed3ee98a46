import os
from typing import Dict
from dotenv import load_dotenv

from app.models.domain import AutoLocation, Coordinate

load_dotenv()  # read .env into the environment


class Settings:
    PROJECT_NAME: str = "Location Agent Backend"
    VERSION: str = "1.0.0"

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    PORT: int = int(os.getenv("PORT", 8001))

    # outbound HTTP
    HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", 10))
    IP_GEOLOCATION_URL: str = os.getenv("IP_GEOLOCATION_URL", "http://ip-api.com/json/")
    GEOCODING_URL: str = os.getenv(
        "GEOCODING_URL", "https://nominatim.openstreetmap.org/search"
    )
    # Nominatim usage policy requires an identifying User-Agent
    GEOCODING_USER_AGENT: str = os.getenv("GEOCODING_USER_AGENT", "LocationAgent/1.0")

    # fallback when IP geolocation fails
    DEFAULT_LOCATION_LATITUDE: float = float(
        os.getenv("DEFAULT_LOCATION_LATITUDE", 6.5244)
    )
    DEFAULT_LOCATION_LONGITUDE: float = float(
        os.getenv("DEFAULT_LOCATION_LONGITUDE", 3.3792)
    )
    DEFAULT_LOCATION_CITY: str = os.getenv("DEFAULT_LOCATION_CITY", "Lagos")
    DEFAULT_LOCATION_COUNTRY: str = os.getenv("DEFAULT_LOCATION_COUNTRY", "Nigeria")
    DEFAULT_LOCATION_ADDRESS: str = os.getenv(
        "DEFAULT_LOCATION_ADDRESS", "Lagos, Nigeria"
    )

    # geocoding query used when the caller gives no address
    DEFAULT_ADDRESS_QUERY: str = os.getenv("DEFAULT_ADDRESS_QUERY", "Lagos, Nigeria")

    ENABLE_PERFORMANCE_MONITORING: bool = (
        os.getenv("ENABLE_PERFORMANCE_MONITORING", "true").lower() == "true"
    )
    SLOW_REQUEST_THRESHOLD_MS: float = float(
        os.getenv("SLOW_REQUEST_THRESHOLD_MS", 2000)
    )

    ALLOWED_ORIGINS: list[str] = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000",
    ).split(",")

    @property
    def default_location(self) -> AutoLocation:
        return AutoLocation(
            coordinate=Coordinate(
                latitude=self.DEFAULT_LOCATION_LATITUDE,
                longitude=self.DEFAULT_LOCATION_LONGITUDE,
            ),
            address=self.DEFAULT_LOCATION_ADDRESS,
            city=self.DEFAULT_LOCATION_CITY,
            country=self.DEFAULT_LOCATION_COUNTRY,
        )


settings = Settings()


# mean earth radius used by the haversine formula (km)
EARTH_RADIUS_KM = 6371

# straight-line average speeds (km/h), no road network or traffic
TRAVEL_SPEEDS_KMH: Dict[str, float] = {
    "driving": 50,
    "walking": 5,
}

NAVIGATION_LINK_BASE = "https://www.google.com/maps/dir/"
NAVIGATION_TRAVEL_MODE = "driving"
