"""Tests for the great-circle distance helper."""

import math

import pytest

from gnss_decoder import EARTH_RADIUS_METERS, deg2rad, great_circle_distance

TOKYO = (35.6858, 139.7567)
OSAKA = (34.6937, 135.5023)


class TestDeg2Rad:
    def test_half_turn(self):
        assert deg2rad(180.0) == pytest.approx(math.pi)

    def test_accepts_int(self):
        assert deg2rad(90) == pytest.approx(math.pi / 2)


class TestGreatCircleDistance:
    def test_same_point_is_zero(self):
        assert great_circle_distance(*TOKYO, *TOKYO) == 0.0

    def test_symmetric(self):
        assert great_circle_distance(*TOKYO, *OSAKA) == pytest.approx(
            great_circle_distance(*OSAKA, *TOKYO)
        )

    def test_one_degree_of_equator(self):
        expected = EARTH_RADIUS_METERS * math.pi / 180.0
        assert great_circle_distance(0.0, 0.0, 0.0, 1.0) == pytest.approx(expected)

    def test_one_degree_of_meridian(self):
        expected = EARTH_RADIUS_METERS * math.pi / 180.0
        assert great_circle_distance(10.0, 20.0, 11.0, 20.0) == pytest.approx(expected)

    def test_antipodes(self):
        assert great_circle_distance(0.0, 0.0, 0.0, 180.0) == pytest.approx(
            EARTH_RADIUS_METERS * math.pi
        )

    def test_tokyo_to_osaka(self):
        # About 400 km on the sphere
        assert great_circle_distance(*TOKYO, *OSAKA) == pytest.approx(403_000, rel=0.01)

    def test_crosses_antimeridian(self):
        assert great_circle_distance(0.0, 179.5, 0.0, -179.5) == pytest.approx(
            EARTH_RADIUS_METERS * math.pi / 180.0
        )
