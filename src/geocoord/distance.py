#!/usr/bin/env python3
"""
Distance calculation strategies between two coordinates.

A strategy is any object with a ``get_distance(a, b)`` method; the two
strategies here both return meters.
"""

from typing import TYPE_CHECKING, Protocol
import functools
import logging
import math

import pyproj

from .ellipsoid import Ellipsoid
from .exceptions import NotMatchingEllipsoidError

if TYPE_CHECKING:
    from .point import Coordinate

logger = logging.getLogger(__name__)

# Unit of the default strategy (Haversine). The default tolerance of
# Coordinate.is_same_location is expressed in this unit.
DEFAULT_DISTANCE_UNIT = "m"


class DistanceStrategy(Protocol):
    """Computes a non-negative scalar distance between two coordinates."""

    def get_distance(self, a: "Coordinate", b: "Coordinate") -> float: ...


def _check_same_ellipsoid(a: "Coordinate", b: "Coordinate") -> Ellipsoid:
    if a.ellipsoid != b.ellipsoid:
        raise NotMatchingEllipsoidError(
            f"The ellipsoids for both coordinates must match "
            f"({a.ellipsoid.name} != {b.ellipsoid.name})"
        )
    return a.ellipsoid


class Haversine:
    """
    Great-circle distance on a sphere.

    The sphere's radius is the arithmetic mean radius of the coordinates'
    ellipsoid. Precise enough for short distances, which makes it the
    default for proximity checks.
    """

    def get_distance(self, a: "Coordinate", b: "Coordinate") -> float:
        """
        Calculate Haversine distance between two coordinates.

        Returns:
            Distance in meters

        Raises:
            NotMatchingEllipsoidError: If the coordinates use different ellipsoids
        """
        ellipsoid = _check_same_ellipsoid(a, b)

        lat1, lon1 = math.radians(a.latitude), math.radians(a.longitude)
        lat2, lon2 = math.radians(b.latitude), math.radians(b.longitude)

        dlat = lat2 - lat1
        dlon = lon2 - lon1

        h = (
            math.sin(dlat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        )

        # h can creep past 1.0 for antipodal points
        return 2 * ellipsoid.arithmetic_mean_radius * math.asin(min(1.0, math.sqrt(h)))


@functools.lru_cache(maxsize=16)
def _geod_for(ellipsoid: Ellipsoid) -> pyproj.Geod:
    logger.debug(f"Creating pyproj.Geod for ellipsoid {ellipsoid.name}")
    return pyproj.Geod(a=ellipsoid.semi_major_axis, f=ellipsoid.flattening)


class Geodesic:
    """Ellipsoid-exact geodesic distance (Karney's algorithm, via pyproj)."""

    def get_distance(self, a: "Coordinate", b: "Coordinate") -> float:
        ellipsoid = _check_same_ellipsoid(a, b)
        geod = _geod_for(ellipsoid)
        _, _, distance = geod.inv(a.longitude, a.latitude, b.longitude, b.latitude)
        return float(distance)
