"""
Reference ellipsoids describing the shape of the Earth (or another body).

Ellipsoid parameters are looked up in the ellipsoid catalog shipped with
pyproj, so any name PROJ knows about (WGS84, GRS80, clrk66, sphere, ...)
can be used.
"""

from typing import NamedTuple
import functools
import logging
import math

import pyproj

from .config import DEFAULT_CONFIG
from .exceptions import UnknownEllipsoidError

logger = logging.getLogger(__name__)


class Ellipsoid(NamedTuple):
    """An oblate ellipsoid of revolution.

    Attributes:
        name: Catalog name or description of the ellipsoid
        semi_major_axis: Equatorial radius (a) in meters
        inverse_flattening: 1/f; ``math.inf`` for a sphere
    """

    name: str
    semi_major_axis: float
    inverse_flattening: float

    @property
    def flattening(self) -> float:
        if math.isinf(self.inverse_flattening):
            return 0.0
        return 1.0 / self.inverse_flattening

    @property
    def semi_minor_axis(self) -> float:
        """Polar radius (b) in meters."""
        return self.semi_major_axis * (1.0 - self.flattening)

    @property
    def arithmetic_mean_radius(self) -> float:
        """Mean radius (2a + b) / 3 in meters, as used by spherical formulas."""
        return (2.0 * self.semi_major_axis + self.semi_minor_axis) / 3.0

    @classmethod
    def from_name(cls, name: str) -> "Ellipsoid":
        """
        Build an ellipsoid from pyproj's ellipsoid catalog.

        Args:
            name: PROJ ellipsoid name, e.g. "WGS84" or "GRS80"

        Returns:
            Ellipsoid with the catalog parameters

        Raises:
            UnknownEllipsoidError: If the catalog has no entry for name
        """
        catalog = pyproj.get_ellps_map()
        try:
            params = catalog[name]
        except KeyError:
            raise UnknownEllipsoidError(f"Unknown ellipsoid: {name}") from None

        a = float(params["a"])
        if "rf" in params:
            rf = float(params["rf"])
        else:
            # Some catalog entries give the semi-minor axis instead
            b = float(params["b"])
            rf = math.inf if a == b else a / (a - b)

        logger.debug(f"Loaded ellipsoid {name}: a={a}, 1/f={rf}")
        return cls(name=name, semi_major_axis=a, inverse_flattening=rf)


@functools.lru_cache(maxsize=None)
def default_ellipsoid() -> Ellipsoid:
    """
    Return the process-wide default ellipsoid.

    The value is created on first use and shared afterwards; every call
    returns the same immutable instance.
    """
    return Ellipsoid.from_name(DEFAULT_CONFIG.default_ellipsoid)
