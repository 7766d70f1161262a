#!/usr/bin/env python3
"""
Command-line interface for geocoord.

Prints a coordinate in a chosen format, or, given two coordinates, the
distance between them and whether they describe the same location.
"""

from typing import Dict, List, Optional
import argparse
import logging
import sys

from . import __version__
from .config import DEFAULT_CONFIG
from .distance import DistanceStrategy, Geodesic, Haversine
from .ellipsoid import Ellipsoid, default_ellipsoid
from .exceptions import GeocoordError
from .formatter import DMS, DecimalDegrees, Formatter, GeoJSON
from .point import Coordinate

# Configure logging
logger = logging.getLogger("geocoord")

DISTANCE_METHODS: Dict[str, DistanceStrategy] = {
    "haversine": Haversine(),
    "geodesic": Geodesic(),
}

FORMATS: Dict[str, Formatter[str]] = {
    "decimal": DecimalDegrees(),
    "dms": DMS(use_cardinal_letters=True),
    "geojson": GeoJSON(),
}


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Geographic coordinate validation, distance and formatting tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "values",
        type=float,
        nargs="*",
        metavar="LAT LNG",
        help="One or two coordinates as latitude/longitude pairs in decimal degrees",
    )
    parser.add_argument(
        "--method",
        type=str,
        default="haversine",
        choices=sorted(DISTANCE_METHODS),
        help="Distance calculation method (default: haversine)",
    )
    parser.add_argument(
        "--format",
        type=str,
        default="decimal",
        choices=sorted(FORMATS),
        help="Output format for coordinates (default: decimal)",
    )
    parser.add_argument(
        "--ellipsoid",
        type=str,
        default=None,
        help=f"Reference ellipsoid name (default: {DEFAULT_CONFIG.default_ellipsoid})",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=DEFAULT_CONFIG.same_location_tolerance,
        help=(
            "Same-location tolerance in meters "
            f"(default: {DEFAULT_CONFIG.same_location_tolerance})"
        ),
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=DEFAULT_CONFIG.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Set logging level (default: {DEFAULT_CONFIG.log_level})",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"geocoord {__version__}",
    )
    return parser


def setup_logging(args: argparse.Namespace) -> None:
    """Setup logging configuration."""
    level = getattr(logging, args.log_level)

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    # Create console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    # pyproj logs its own PROJ diagnostics
    logging.getLogger("pyproj").setLevel(logging.WARNING)


def build_coordinates(
    values: List[float], ellipsoid: Optional[Ellipsoid]
) -> List[Coordinate]:
    """
    Turn a flat list of numbers into coordinates.

    Raises:
        ValueError: If the number of values is not 2 or 4
        InvalidCoordinateError: If a latitude or longitude is out of range
    """
    if len(values) not in (2, 4):
        raise ValueError(
            f"Expected one or two LAT LNG pairs, got {len(values)} value(s)"
        )
    return [
        Coordinate(values[i], values[i + 1], ellipsoid)
        for i in range(0, len(values), 2)
    ]


def main(argv: Optional[List[str]] = None) -> None:
    """
    Parses command-line arguments, validates the coordinates and prints
    them, plus distance and same-location check for a pair.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.values:
        parser.print_help()
        sys.exit(1)

    # Setup logging
    setup_logging(args)

    try:
        ellipsoid = (
            Ellipsoid.from_name(args.ellipsoid) if args.ellipsoid else default_ellipsoid()
        )
        coordinates = build_coordinates(args.values, ellipsoid)
    except (GeocoordError, ValueError) as e:
        logger.error(f"{e}")
        sys.exit(1)

    formatter = FORMATS[args.format]
    for coordinate in coordinates:
        print(coordinate.format(formatter))

    if len(coordinates) < 2:
        return

    first, second = coordinates
    strategy = DISTANCE_METHODS[args.method]
    try:
        distance = first.distance_to(second, strategy)
    except GeocoordError as e:
        logger.error(f"Failed to calculate distance: {e}")
        sys.exit(1)
    logger.info(f"Calculated {args.method} distance on {ellipsoid.name}")

    print(f"Distance ({args.method}): {distance:.3f} m")
    same = first.is_same_location(second, args.tolerance)
    print(f"Same location (tolerance {args.tolerance} m): {'yes' if same else 'no'}")


if __name__ == "__main__":
    main()
