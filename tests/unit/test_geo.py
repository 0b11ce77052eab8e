# ABOUTME: Unit tests for the haversine distance helper.
# ABOUTME: Checks known distances, symmetry, and degenerate cases.

import pytest

from pocketlibrary.catalog.geo import EARTH_RADIUS_KM, haversine_km
from pocketlibrary.catalog.types import Coordinate


class TestHaversine:
    """Tests for haversine_km."""

    def test_same_point_is_zero(self) -> None:
        """Distance from a point to itself is zero."""
        here = Coordinate(33.882, -117.885)
        assert haversine_km(here, here) == 0.0

    def test_one_degree_of_latitude(self) -> None:
        """One degree along a meridian is about 111.19 km."""
        distance = haversine_km(Coordinate(0.0, 0.0), Coordinate(1.0, 0.0))
        assert distance == pytest.approx(111.195, abs=0.01)

    def test_symmetric(self) -> None:
        """Distance does not depend on direction."""
        a = Coordinate(33.882, -117.885)
        b = Coordinate(34.0504, -118.2551)
        assert haversine_km(a, b) == pytest.approx(haversine_km(b, a))

    def test_antipodal_points(self) -> None:
        """Antipodal points are half the circumference apart."""
        distance = haversine_km(Coordinate(0.0, 0.0), Coordinate(0.0, 180.0))
        assert distance == pytest.approx(3.141592653589793 * EARTH_RADIUS_KM)

    def test_fullerton_to_los_angeles(self) -> None:
        """Fullerton to downtown Los Angeles is roughly 38 km."""
        distance = haversine_km(Coordinate(33.882, -117.885), Coordinate(34.0504, -118.2551))
        assert 35.0 < distance < 41.0
