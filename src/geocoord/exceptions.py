"""Exception types raised by geocoord."""

from typing import Tuple


class GeocoordError(Exception):
    """Base class for all geocoord errors."""


class InvalidCoordinateError(GeocoordError, ValueError):
    """A latitude or longitude lies outside its valid closed range."""

    def __init__(self, field: str, value: float, bounds: Tuple[float, float]):
        self.field = field
        self.value = value
        self.bounds = bounds
        lower, upper = bounds
        super().__init__(
            f"{field.capitalize()} value must be numeric {lower} .. +{upper} (given: {value})"
        )


class NotMatchingEllipsoidError(GeocoordError, ValueError):
    """Two coordinates refer to different reference ellipsoids."""


class UnknownEllipsoidError(GeocoordError, KeyError):
    """The requested ellipsoid is not in the catalog."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""
