#!/usr/bin/env python3
"""
Geocoord - validated, immutable geographic coordinates.

This package provides a coordinate value type with pluggable distance
calculation and formatting strategies.
"""
import importlib.metadata

__version__ = importlib.metadata.version("geocoord")

# Import main classes for public API
from .exceptions import (
    GeocoordError,
    InvalidCoordinateError,
    NotMatchingEllipsoidError,
    UnknownEllipsoidError,
)
from .ellipsoid import Ellipsoid, default_ellipsoid
from .distance import DistanceStrategy, Geodesic, Haversine
from .formatter import DMS, DecimalDegrees, Formatter, FoliumMarker, GeoJSON
from .point import Coordinate, Geometry

__all__ = [
    "Coordinate",
    "Geometry",
    "Ellipsoid",
    "default_ellipsoid",
    "DistanceStrategy",
    "Haversine",
    "Geodesic",
    "Formatter",
    "DecimalDegrees",
    "DMS",
    "GeoJSON",
    "FoliumMarker",
    "GeocoordError",
    "InvalidCoordinateError",
    "NotMatchingEllipsoidError",
    "UnknownEllipsoidError",
]
