"""
DistanceCalculator tests
"""

import pytest
import math
from app.algorithms.distance_calculator import DistanceCalculator
from app.models.domain import Coordinate


class TestDistanceCalculator:
    """DistanceCalculator test class"""

    @pytest.fixture
    def calculator(self):
        return DistanceCalculator()

    def test_calculate_distance_same_point(self, calculator, lagos_coords):
        """Distance from a point to itself is 0"""
        lat, lon = lagos_coords["lagos"]["lat"], lagos_coords["lagos"]["lon"]

        distance = calculator.calculate_distance(lat, lon, lat, lon)

        assert distance == 0.0

    def test_lagos_to_lekki_fixture(self, calculator, lagos_coords):
        """Lagos (6.5244, 3.3792) -> Lekki (6.4550, 3.4246) is about 9.20 km"""
        lagos, lekki = lagos_coords["lagos"], lagos_coords["lekki"]

        distance = calculator.calculate_distance(
            lagos["lat"], lagos["lon"], lekki["lat"], lekki["lon"]
        )

        assert round(distance, 2) == pytest.approx(9.20, abs=0.01)

    def test_calculate_distance_known_locations(self, calculator, lagos_coords):
        """Ikeja -> Lekki, about 18 km"""
        ikeja, lekki = lagos_coords["ikeja"], lagos_coords["lekki"]

        distance = calculator.calculate_distance(
            ikeja["lat"], ikeja["lon"], lekki["lat"], lekki["lon"]
        )

        assert 17.5 < distance < 19

    def test_calculate_distance_long_distance(self, calculator, lagos_coords):
        """Lagos -> Abuja, roughly 525 km straight line"""
        lagos, abuja = lagos_coords["lagos"], lagos_coords["abuja"]

        distance = calculator.calculate_distance(
            lagos["lat"], lagos["lon"], abuja["lat"], abuja["lon"]
        )

        assert 500 < distance < 550

    def test_distance_symmetry(self, calculator, lagos_coords):
        """A -> B == B -> A"""
        test_pairs = [
            (lagos_coords["lagos"], lagos_coords["lekki"]),
            (lagos_coords["ikeja"], lagos_coords["abuja"]),
            ({"lat": -33.8688, "lon": 151.2093}, {"lat": 51.5074, "lon": -0.1278}),
        ]

        for a, b in test_pairs:
            forward = calculator.calculate_distance(a["lat"], a["lon"], b["lat"], b["lon"])
            backward = calculator.calculate_distance(b["lat"], b["lon"], a["lat"], a["lon"])
            assert forward == pytest.approx(backward, abs=1e-9)

    def test_distance_between_coordinates(self, calculator, lagos_coords):
        """distance_between matches calculate_distance"""
        lagos, lekki = lagos_coords["lagos"], lagos_coords["lekki"]

        expected = calculator.calculate_distance(
            lagos["lat"], lagos["lon"], lekki["lat"], lekki["lon"]
        )
        actual = calculator.distance_between(
            Coordinate(lagos["lat"], lagos["lon"]),
            Coordinate(lekki["lat"], lekki["lon"]),
        )

        assert actual == expected

    def test_calculate_distance_returns_kilometers(self, calculator):
        """Result is in km"""
        distance = calculator.calculate_distance(0, 0, 0, 1)

        # one degree of longitude on the equator ~= 111.19 km
        assert isinstance(distance, float)
        assert distance == pytest.approx(6371 * math.pi / 180, rel=1e-9)

    def test_north_south_distance(self, calculator):
        """One degree of latitude ~= 111 km"""
        distance = calculator.calculate_distance(6.0, 3.0, 7.0, 3.0)

        assert 110 < distance < 112

    def test_east_west_distance(self, calculator):
        """One degree of longitude at Abuja's latitude (9N) ~= 109.8 km"""
        distance = calculator.calculate_distance(9.0, 7.0, 9.0, 8.0)

        assert 109 < distance < 110.5

    def test_antipodal_points(self, calculator):
        """Opposite sides of the globe: half the circumference"""
        distance = calculator.calculate_distance(0, 0, 0, 180)

        assert distance == pytest.approx(math.pi * 6371, rel=1e-9)

    def test_diagonal_distance(self, calculator):
        """Diagonal is shorter than the two legs combined"""
        lat1, lon1 = 6.0, 3.0
        lat2, lon2 = 7.0, 4.0

        distance = calculator.calculate_distance(lat1, lon1, lat2, lon2)
        north_south = calculator.calculate_distance(lat1, lon1, lat2, lon1)
        east_west = calculator.calculate_distance(lat1, lon1, lat1, lon2)

        assert distance < (north_south + east_west)
        assert distance > max(north_south, east_west)
