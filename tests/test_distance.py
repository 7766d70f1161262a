import math

import pytest

from geocoord.distance import Geodesic, Haversine
from geocoord.ellipsoid import Ellipsoid
from geocoord.exceptions import NotMatchingEllipsoidError
from geocoord.point import Coordinate

BERLIN = Coordinate(52.5200, 13.4050)
PARIS = Coordinate(48.8566, 2.3522)


@pytest.mark.parametrize("strategy", [Haversine(), Geodesic()])
class TestStrategies:
    def test_berlin_to_paris(self, strategy):
        assert BERLIN.distance_to(PARIS, strategy) == pytest.approx(878000, rel=0.01)

    def test_zero_distance(self, strategy):
        assert strategy.get_distance(BERLIN, BERLIN) == pytest.approx(0.0, abs=1e-9)

    def test_symmetric(self, strategy):
        assert strategy.get_distance(BERLIN, PARIS) == pytest.approx(
            strategy.get_distance(PARIS, BERLIN)
        )

    def test_not_matching_ellipsoids(self, strategy):
        grs80 = Coordinate(48.8566, 2.3522, Ellipsoid.from_name("GRS80"))
        with pytest.raises(NotMatchingEllipsoidError):
            strategy.get_distance(BERLIN, grs80)


def test_haversine_short_distance():
    a = Coordinate(52.5200, 13.4050)
    b = Coordinate(52.5200, 13.4051)
    assert Haversine().get_distance(a, b) == pytest.approx(6.77, abs=0.02)


def test_haversine_antipodal_points():
    a = Coordinate(0.0, 0.0)
    b = Coordinate(0.0, 180.0)
    radius = a.ellipsoid.arithmetic_mean_radius
    assert Haversine().get_distance(a, b) == pytest.approx(math.pi * radius)


def test_haversine_uses_ellipsoid_mean_radius():
    sphere = Ellipsoid.from_name("sphere")
    a = Coordinate(0.0, 0.0, sphere)
    b = Coordinate(0.0, 1.0, sphere)
    expected = sphere.semi_major_axis * math.radians(1.0)
    assert Haversine().get_distance(a, b) == pytest.approx(expected)


def test_geodesic_one_degree_along_equator():
    # WGS84 equatorial arc length of one degree
    a = Coordinate(0.0, 0.0)
    b = Coordinate(0.0, 1.0)
    assert Geodesic().get_distance(a, b) == pytest.approx(111319.49, abs=0.01)


def test_geodesic_and_haversine_agree_roughly():
    haversine = Haversine().get_distance(BERLIN, PARIS)
    geodesic = Geodesic().get_distance(BERLIN, PARIS)
    assert abs(haversine - geodesic) / geodesic < 0.005
