import asyncio
import logging
from typing import Optional

from httpx import AsyncClient, HTTPError

from app.core.config import Settings, settings
from app.core.exceptions import GeocodingServiceException, LocationNotFoundException
from app.models.domain import AutoLocation, Coordinate, JourneyEstimate, ResolvedLocation
from app.services.journey_estimator import JourneyEstimator

logger = logging.getLogger(__name__)


class LocationService:
    """
    Resolves locations through external HTTP APIs

    - IP geolocation (ip-api.com): soft fail, falls back to the default location
    - forward geocoding (Nominatim): hard fail, raises
    Every outbound call is attempted exactly once.
    """

    def __init__(
        self,
        http_client: AsyncClient,
        estimator: Optional[JourneyEstimator] = None,
        config: Settings = settings,
    ):
        self.http_client = http_client
        self.estimator = estimator or JourneyEstimator()
        self.config = config

    async def resolve_by_ip(self) -> AutoLocation:
        """Approximate location of the caller's public IP, never raises"""
        fallback = self.config.default_location

        try:
            response = await self.http_client.get(self.config.IP_GEOLOCATION_URL)
            response.raise_for_status()
            data = response.json()
        except (HTTPError, ValueError) as e:
            logger.warning(f"IP geolocation failed, using default location: {e}")
            return fallback

        if not isinstance(data, dict) or data.get("status") == "fail":
            logger.warning(
                "IP geolocation reported failure, using default location: %s",
                data.get("message") if isinstance(data, dict) else data,
            )
            return fallback

        try:
            city = data.get("city") or ""
            country = data.get("country") or ""
            region = data.get("regionName") or ""
            location = AutoLocation(
                coordinate=Coordinate(
                    latitude=float(data["lat"]), longitude=float(data["lon"])
                ),
                address=", ".join(part for part in (city, region, country) if part),
                city=city,
                country=country,
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Unexpected IP geolocation response, using default: {e}")
            return fallback

        logger.info(f"IP geolocation: {location.address}")
        return location

    async def resolve_by_address(self, query: Optional[str] = None) -> ResolvedLocation:
        """
        Forward geocode a free-text address

        Args:
            query: address text, the configured default query when empty

        Raises:
            LocationNotFoundException: no result for the query
            GeocodingServiceException: upstream error or malformed response
        """
        location_query = query or self.config.DEFAULT_ADDRESS_QUERY
        params = {"q": location_query, "format": "json", "limit": 1}
        headers = {"User-Agent": self.config.GEOCODING_USER_AGENT}

        try:
            response = await self.http_client.get(
                self.config.GEOCODING_URL, params=params, headers=headers
            )
        except HTTPError as e:
            logger.error(f"Geocoding request failed for '{location_query}': {e}")
            raise GeocodingServiceException(
                f"Geocoding request failed: {str(e)}"
            ) from e

        if response.status_code != 200:
            logger.error(
                "Geocoding upstream HTTP error %s for '%s': %s",
                response.status_code,
                location_query,
                response.text,
            )
            raise GeocodingServiceException(
                f"Geocoding service returned error status {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise GeocodingServiceException(
                f"Invalid response from geocoding service: {str(e)}"
            ) from e

        if not data:
            logger.warning(f"No geocoding result for '{location_query}'")
            raise LocationNotFoundException(location_query)

        try:
            result = data[0]
            location = ResolvedLocation(
                coordinate=Coordinate(
                    latitude=float(result["lat"]), longitude=float(result["lon"])
                ),
                address=result["display_name"],
            )
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise GeocodingServiceException(
                f"Unexpected response format from geocoding service: {str(e)}"
            ) from e

        logger.info(f"Geocoded '{location_query}' -> {location.address}")
        return location

    async def get_directions(
        self, origin: str, destination: str, current_hour: Optional[int] = None
    ) -> JourneyEstimate:
        """
        Resolve both addresses concurrently, then estimate the journey

        Both lookups run to completion; when both fail the origin's error
        is raised, independent of which response arrived first.
        """
        origin_location, destination_location = await asyncio.gather(
            self.resolve_by_address(origin),
            self.resolve_by_address(destination),
            return_exceptions=True,
        )
        for result in (origin_location, destination_location):
            if isinstance(result, BaseException):
                raise result

        return self.estimator.estimate_journey(
            origin_location.coordinate,
            destination_location.coordinate,
            origin_location.address,
            destination_location.address,
            link_origin=origin,
            link_destination=destination,
            current_hour=current_hour,
        )
