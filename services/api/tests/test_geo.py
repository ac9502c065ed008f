"""Tests for great-circle distance and proximity ranking."""

import math

import pytest

from school_api.geo import EARTH_RADIUS_KM, haversine_km, rank_by_distance

KM_PER_DEGREE = 2 * math.pi * EARTH_RADIUS_KM / 360


def test_same_point_is_zero() -> None:
    """Identical points are zero kilometers apart."""
    assert haversine_km(12.5, -45.25, 12.5, -45.25) == 0.0


@pytest.mark.parametrize(
    "a, b",
    [
        ((0.0, 0.0), (10.0, 20.0)),
        ((51.5074, -0.1278), (40.7128, -74.0060)),
        ((-33.8688, 151.2093), (35.6762, 139.6503)),
        ((89.9, 179.9), (-89.9, -179.9)),
    ],
)
def test_symmetric(a, b) -> None:
    """Swapping the two points does not change the distance."""
    assert haversine_km(*a, *b) == pytest.approx(haversine_km(*b, *a))


def test_one_degree_latitude_at_equator() -> None:
    """One degree of latitude is about 111.19 km with R = 6371 km."""
    assert haversine_km(0, 0, 1, 0) == pytest.approx(111.19, abs=0.01)


def test_known_city_pair() -> None:
    # London -> Paris is roughly 344 km
    assert haversine_km(51.5074, -0.1278, 48.8566, 2.3522) == pytest.approx(343.5, abs=1.0)


def test_antipodes_are_half_circumference() -> None:
    assert haversine_km(0, 0, 0, 180) == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_rank_by_distance_orders_nearest_first() -> None:
    rows = [
        {"id": 1, "name": "five", "latitude": 0.0, "longitude": 5 / KM_PER_DEGREE},
        {"id": 2, "name": "one", "latitude": 0.0, "longitude": 1 / KM_PER_DEGREE},
        {"id": 3, "name": "ten", "latitude": 0.0, "longitude": 10 / KM_PER_DEGREE},
    ]

    ranked = rank_by_distance(rows, 0.0, 0.0)

    assert [r["name"] for r in ranked] == ["one", "five", "ten"]
    assert [r["distance"] for r in ranked] == pytest.approx([1.0, 5.0, 10.0])


def test_rank_by_distance_ties_keep_input_order() -> None:
    """Rows at equal distance keep the order they were passed in."""
    rows = [
        {"id": 1, "latitude": 1.0, "longitude": 0.0},
        {"id": 2, "latitude": -1.0, "longitude": 0.0},
        {"id": 3, "latitude": 0.0, "longitude": 0.0},
        {"id": 4, "latitude": 1.0, "longitude": 0.0},
    ]

    ranked = rank_by_distance(rows, 0.0, 0.0)

    assert [r["id"] for r in ranked] == [3, 1, 2, 4]


def test_rank_by_distance_does_not_mutate_rows() -> None:
    """Ranking works on copies; caller rows get no `distance` key."""
    rows = [{"id": 1, "latitude": 1.0, "longitude": 1.0}]
    rank_by_distance(rows, 0.0, 0.0)
    assert "distance" not in rows[0]


def test_rank_by_distance_empty() -> None:
    assert rank_by_distance([], 0.0, 0.0) == []
