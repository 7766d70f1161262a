from dataclasses import dataclass


@dataclass(frozen=True)
class GeocoordConfig:
    """Configuration for geocoord defaults and the geocoord CLI."""

    default_ellipsoid: str = "WGS84"
    same_location_tolerance: float = 0.001  # meters, unit of Haversine
    log_level: str = "WARNING"


DEFAULT_CONFIG = GeocoordConfig()
