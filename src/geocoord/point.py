#!/usr/bin/env python3
"""
The Coordinate value type: a validated latitude/longitude pair on a
reference ellipsoid.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Protocol, Sequence, TypeVar
import logging

from shapely.geometry import Point

from .bounds import (
    LATITUDE_BOUNDS,
    LONGITUDE_BOUNDS,
    is_valid_latitude,
    is_valid_longitude,
)
from .config import DEFAULT_CONFIG
from .distance import DistanceStrategy, Haversine
from .ellipsoid import Ellipsoid, default_ellipsoid
from .exceptions import InvalidCoordinateError

if TYPE_CHECKING:
    from .formatter import Formatter

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Geometry(Protocol):
    """Anything that can list the coordinates it is made of."""

    def points(self) -> Sequence["Coordinate"]: ...


@dataclass(frozen=True)
class Coordinate:
    """
    An immutable geographic coordinate.

    Latitude must lie in [-90.0, 90.0] and longitude in [-180.0, 180.0],
    both bounds inclusive. Values are stored exactly as given. If no
    ellipsoid is supplied the process-wide default ellipsoid is used.

    Raises:
        InvalidCoordinateError: If latitude or longitude is out of range.
            Latitude is checked first.
    """

    latitude: float
    longitude: float
    ellipsoid: Optional[Ellipsoid] = None

    def __post_init__(self) -> None:
        if not is_valid_latitude(self.latitude):
            raise InvalidCoordinateError("latitude", self.latitude, LATITUDE_BOUNDS)
        if not is_valid_longitude(self.longitude):
            raise InvalidCoordinateError("longitude", self.longitude, LONGITUDE_BOUNDS)

        # Use object.__setattr__ since dataclass is frozen
        if self.ellipsoid is None:
            object.__setattr__(self, "ellipsoid", default_ellipsoid())

    def points(self) -> List["Coordinate"]:
        """Return a list containing only this coordinate."""
        return [self]

    def distance_to(self, other: "Coordinate", strategy: DistanceStrategy) -> float:
        """
        Calculate the distance between this coordinate and another one.

        Args:
            other: The coordinate to measure to
            strategy: Distance calculation strategy; it also decides the unit

        Returns:
            Distance as computed by the strategy
        """
        return strategy.get_distance(self, other)

    def is_same_location(
        self,
        other: "Coordinate",
        tolerance: float = DEFAULT_CONFIG.same_location_tolerance,
    ) -> bool:
        """
        Check if two coordinates describe the same location within a tolerance.

        Uses the Haversine strategy as it is precise enough for short
        distances. The tolerance is therefore in meters; the default is
        one millimeter.
        """
        distance = self.distance_to(other, Haversine())
        logger.debug(f"Distance between {self} and {other}: {distance} m")
        return distance <= tolerance

    def format(self, formatter: "Formatter[T]") -> T:
        return formatter.format(self)

    def to_shapely(self) -> Point:
        """Convert to a Shapely Point in (longitude, latitude) order."""
        return Point(self.longitude, self.latitude)

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"
