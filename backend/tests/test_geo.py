import math

import pytest

from buildex.core.geo import EARTH_RADIUS_KM, haversine_km

POINTS = [
    (19.0760, 72.8777),    # Mumbai
    (18.5204, 73.8567),    # Pune
    (28.6139, 77.2090),    # Delhi
    (-33.8688, 151.2093),  # Sydney
    (51.5074, -0.1278),    # London
    (0.0, 0.0),
    (89.9, -179.9),
]


def reference_haversine(lat1, lon1, lat2, lon2):
    # asin form of the same formula
    p1, p2 = math.radians(lat1), math.radians(lat2)
    dp, dl = p2 - p1, math.radians(lon2 - lon1)
    h = math.sin(dp / 2) ** 2 + math.cos(p1) * math.cos(p2) * math.sin(dl / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(min(1.0, h)))


@pytest.mark.parametrize("point", POINTS)
def test_distance_to_self_is_zero(point):
    assert haversine_km(*point, *point) == 0


def test_distance_is_symmetric():
    for a in POINTS:
        for b in POINTS:
            assert haversine_km(*a, *b) == pytest.approx(haversine_km(*b, *a), rel=1e-12, abs=1e-12)


def test_matches_reference_formula():
    for a in POINTS:
        for b in POINTS:
            assert haversine_km(*a, *b) == pytest.approx(reference_haversine(*a, *b), rel=1e-6, abs=1e-9)


def test_one_degree_of_longitude_on_equator():
    assert haversine_km(0, 0, 0, 1) == pytest.approx(111.19492664, rel=1e-6)


def test_antipodal_points_are_half_circumference_apart():
    assert haversine_km(0, 0, 0, 180) == pytest.approx(math.pi * EARTH_RADIUS_KM, rel=1e-9)


def test_mumbai_to_pune():
    assert haversine_km(19.0760, 72.8777, 18.5204, 73.8567) == pytest.approx(120.2, abs=1.0)


def test_near_antipodal_points_never_fail():
    half_circumference = math.pi * EARTH_RADIUS_KM
    for lat in range(-89, 90):
        for lon in (-179.5, -90.25, 0.0, 45.75, 179.5):
            lat1 = lat + 0.123
            lon2 = lon - 180 if lon > 0 else lon + 180
            distance = haversine_km(lat1, lon, -lat1, lon2)
            assert distance == pytest.approx(half_circumference, rel=1e-6)
