"""Tests for the haversine distance."""
import math

import pytest

from courts_finder.core.geo import EARTH_RADIUS_KM, haversine_distance

DOWNTOWN_TENNIS = (35.7344, -81.3412)
COMMUNITY_BASKETBALL = (35.7267, -81.3284)


def test_same_point_is_zero():
    assert haversine_distance(*DOWNTOWN_TENNIS, *DOWNTOWN_TENNIS) == 0.0


@pytest.mark.parametrize("a, b", [
    (DOWNTOWN_TENNIS, COMMUNITY_BASKETBALL),
    ((51.5074, -0.1278), (40.7128, -74.0060)),
    ((-33.8688, 151.2093), (35.6762, 139.6503)),
])
def test_distance_is_symmetric(a, b):
    assert haversine_distance(*a, *b) == pytest.approx(haversine_distance(*b, *a))


def test_antipodal_points_are_half_the_circumference():
    assert haversine_distance(0, 0, 0, 180) == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_nearby_courts_are_about_a_kilometer_and_a_half_apart():
    distance = haversine_distance(*DOWNTOWN_TENNIS, *COMMUNITY_BASKETBALL)
    assert 1.3 < distance < 1.6


def test_known_city_distance():
    # London to New York is roughly 5570 km
    distance = haversine_distance(51.5074, -0.1278, 40.7128, -74.0060)
    assert distance == pytest.approx(5570, rel=0.01)


def test_nan_input_propagates():
    assert math.isnan(haversine_distance(float("nan"), 0.0, 0.0, 0.0))
