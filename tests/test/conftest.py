"""
Pytest configuration and shared fixtures
"""

import sys
from pathlib import Path

import httpx
import pytest

# project root on sys.path
project_root = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(project_root))


@pytest.fixture
def lagos_coords():
    """Lagos (default location) and a point in Lekki"""
    return {
        "lagos": {"lat": 6.5244, "lon": 3.3792},
        "lekki": {"lat": 6.4550, "lon": 3.4246},
        "ikeja": {"lat": 6.6018, "lon": 3.3515},
        "abuja": {"lat": 9.0765, "lon": 7.3986},
    }


@pytest.fixture
def nominatim_results(lagos_coords):
    """Nominatim search responses keyed by query"""
    return {
        "Ikeja": [
            {
                "lat": str(lagos_coords["ikeja"]["lat"]),
                "lon": str(lagos_coords["ikeja"]["lon"]),
                "display_name": "Ikeja, Lagos State, Nigeria",
            }
        ],
        "Lekki": [
            {
                "lat": str(lagos_coords["lekki"]["lat"]),
                "lon": str(lagos_coords["lekki"]["lon"]),
                "display_name": "Lekki Phase 1, Lagos State, Nigeria",
            }
        ],
        "Lagos, Nigeria": [
            {
                "lat": str(lagos_coords["lagos"]["lat"]),
                "lon": str(lagos_coords["lagos"]["lon"]),
                "display_name": "Lagos, Lagos State, Nigeria",
            }
        ],
        "Abuja": [
            {
                "lat": str(lagos_coords["abuja"]["lat"]),
                "lon": str(lagos_coords["abuja"]["lon"]),
                "display_name": "Abuja, Federal Capital Territory, Nigeria",
            }
        ],
    }


@pytest.fixture
def ip_api_success():
    """ip-api.com success payload"""
    return {
        "status": "success",
        "country": "Nigeria",
        "regionName": "Lagos",
        "city": "Ikeja",
        "lat": 6.6018,
        "lon": 3.3515,
        "query": "102.89.0.1",
    }


@pytest.fixture
def upstream(nominatim_results, ip_api_success):
    """
    Fake upstream APIs behind httpx.MockTransport

    ip-api answers with `ip_response` (a payload, or an exception to raise);
    Nominatim answers from nominatim_results, [] for unknown queries.
    Every request is recorded in `requests`.
    """

    class FakeUpstream:
        def __init__(self):
            self.requests = []
            self.ip_response = ip_api_success
            self.ip_status = 200
            self.geocode_status = 200

        def handler(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)

            if request.url.host == "ip-api.com":
                if isinstance(self.ip_response, Exception):
                    raise self.ip_response
                if isinstance(self.ip_response, str):
                    return httpx.Response(self.ip_status, text=self.ip_response)
                return httpx.Response(self.ip_status, json=self.ip_response)

            if self.geocode_status != 200:
                return httpx.Response(self.geocode_status, text="upstream error")
            query = request.url.params.get("q")
            return httpx.Response(200, json=nominatim_results.get(query, []))

        def client(self) -> httpx.AsyncClient:
            return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

        def geocode_requests(self):
            return [r for r in self.requests if r.url.host != "ip-api.com"]

    return FakeUpstream()
