"""
Closed-range bounds checks for latitude and longitude values.
"""

from typing import Tuple

LATITUDE_BOUNDS: Tuple[float, float] = (-90.0, 90.0)
LONGITUDE_BOUNDS: Tuple[float, float] = (-180.0, 180.0)


def is_numeric_in_bounds(value: float, lower: float, upper: float) -> bool:
    """
    Check if the given value lies between lower and upper bounds.

    Both bounds are inclusive. NaN is never in bounds.

    Args:
        value: Value to check
        lower: Lower bound (inclusive)
        upper: Upper bound (inclusive)

    Returns:
        True if lower <= value <= upper, False otherwise
    """
    return lower <= value <= upper


def is_valid_latitude(latitude: float) -> bool:
    return is_numeric_in_bounds(latitude, *LATITUDE_BOUNDS)


def is_valid_longitude(longitude: float) -> bool:
    return is_numeric_in_bounds(longitude, *LONGITUDE_BOUNDS)
