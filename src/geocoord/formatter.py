"""
Formatters rendering a coordinate to some output representation.

A formatter is any object with a ``format(point)`` method. The output type
is chosen by the formatter: text for most of the ones here, a folium map
marker for FoliumMarker.
"""

from typing import TYPE_CHECKING, Optional, Protocol, Tuple, TypeVar
import json

import folium

if TYPE_CHECKING:
    from .point import Coordinate

T_co = TypeVar("T_co", covariant=True)


class Formatter(Protocol[T_co]):
    """Renders a coordinate to a representation of type T_co."""

    def format(self, point: "Coordinate") -> T_co: ...


class DecimalDegrees:
    """Formats as ``"<lat><separator><lng>"`` in decimal degrees."""

    def __init__(self, separator: str = " ", precision: int = 5):
        self.separator = separator
        self.precision = precision

    def format(self, point: "Coordinate") -> str:
        p = self.precision
        return f"{point.latitude:.{p}f}{self.separator}{point.longitude:.{p}f}"


def _split_dms(value: float) -> Tuple[int, int, int]:
    """Split an absolute angle in degrees into whole degrees, minutes and seconds."""
    # Round on total seconds so 13.405 gives 18″ and not 17″
    total_seconds = int(round(abs(value) * 3600))
    minutes, seconds = divmod(total_seconds, 60)
    degrees, minutes = divmod(minutes, 60)
    return degrees, minutes, seconds


class DMS:
    """
    Formats as degrees, minutes and seconds.

    Examples for Berlin (52.52, 13.405):
        ``52° 31′ 12″ 013° 24′ 18″``
        ``52° 31′ 12″ N 013° 24′ 18″ E`` (with cardinal letters)
    """

    UNITS = {"deg": "°", "min": "′", "sec": "″"}

    def __init__(self, separator: str = " ", use_cardinal_letters: bool = False):
        self.separator = separator
        self.use_cardinal_letters = use_cardinal_letters

    def _format_value(self, value: float, width: int, letters: Tuple[str, str]) -> str:
        degrees, minutes, seconds = _split_dms(value)
        text = (
            f"{degrees:0{width}d}{self.UNITS['deg']} "
            f"{minutes:02d}{self.UNITS['min']} "
            f"{seconds:02d}{self.UNITS['sec']}"
        )
        if self.use_cardinal_letters:
            return f"{text} {letters[0] if value >= 0 else letters[1]}"
        if value < 0:
            return "-" + text
        return text

    def format(self, point: "Coordinate") -> str:
        lat = self._format_value(point.latitude, 2, ("N", "S"))
        lng = self._format_value(point.longitude, 3, ("E", "W"))
        return f"{lat}{self.separator}{lng}"


class GeoJSON:
    """Formats as a GeoJSON Point geometry (coordinates in lng, lat order)."""

    def format(self, point: "Coordinate") -> str:
        return json.dumps(
            {"type": "Point", "coordinates": [point.longitude, point.latitude]}
        )


class FoliumMarker:
    """Renders a coordinate as a folium map marker."""

    def __init__(self, popup: Optional[str] = None, tooltip: Optional[str] = None):
        self.popup = popup
        self.tooltip = tooltip

    def format(self, point: "Coordinate") -> folium.Marker:
        return folium.Marker(
            location=[point.latitude, point.longitude],
            popup=self.popup,
            tooltip=self.tooltip,
        )
