"""
The Indian Grid zone catalog and the first-match zone resolver
"""
from __future__ import annotations

__all__ = [
    'GridZone', 'ZONES', 'get_zone', 'is_within_grid_bounds', 'resolve_zone',
    'zones_in_bounds',
]

from typing import Tuple, Union

from indiangrid.results import NO_ZONE, NoZoneFound
from indiangrid.utils.functions import in_closed_range


class GridZone:
    """
    A single Lambert Conformal Conic zone: a natural origin plus the geographic
    bounding box the zone covers. All angles in decimal degrees.
    """

    def __init__(
        self,
        name: str,
        origin_lat: float,
        origin_lon: float,
        min_lat: float,
        max_lat: float,
        min_lon: float,
        max_lon: float,
    ):
        for key, value in (
            ('name', name),
            ('origin_lat', origin_lat),
            ('origin_lon', origin_lon),
            ('min_lat', min_lat),
            ('max_lat', max_lat),
            ('min_lon', min_lon),
            ('max_lon', max_lon),
        ):
            object.__setattr__(self, key, value)

    def __setattr__(self, key, value):
        raise AttributeError('GridZone is immutable')

    def __eq__(self, other):
        if not isinstance(other, GridZone):
            return False

        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    def __repr__(self):
        return f'<GridZone {self.name}>'

    @property
    def _key(self):
        return (
            self.name, self.origin_lat, self.origin_lon,
            self.min_lat, self.max_lat, self.min_lon, self.max_lon
        )

    @property
    def code(self) -> str:
        """The zone's roman numeral code, e.g. 'IIA'"""
        return self.name.split(' ', 1)[-1]

    @property
    def description(self) -> str:
        """Display label with the zone's origin, e.g. 'Zone I (32.5°N, 68.0°E)'"""
        return f'{self.name} ({float(self.origin_lat)}°N, {float(self.origin_lon)}°E)'

    @property
    def standard_parallels(self) -> Tuple[float, float]:
        """
        The two standard parallels, in degrees, placed one sixth of the zone's
        latitudinal extent inside its southern and northern edges.
        """
        lat_range = self.max_lat - self.min_lat
        return self.min_lat + lat_range / 6, self.max_lat - lat_range / 6

    def contains(self, latitude: float, longitude: float) -> bool:
        """Test whether a point falls within the zone's bounding box, edges included"""
        return (
            in_closed_range(latitude, self.min_lat, self.max_lat) and
            in_closed_range(longitude, self.min_lon, self.max_lon)
        )

    def overlaps(self, min_lat: float, max_lat: float, min_lon: float, max_lon: float) -> bool:
        """Test whether the zone's bounding box intersects another box (touching counts)"""
        return not (
            self.max_lat < min_lat or self.min_lat > max_lat or
            self.max_lon < min_lon or self.min_lon > max_lon
        )


# Catalog order decides which zone wins where bounding boxes overlap
ZONES: Tuple[GridZone, ...] = (
    GridZone('Zone 0', 39.5, 68.0, 35.0, 42.0, 64.0, 72.0),
    GridZone('Zone I', 32.5, 68.0, 28.0, 36.0, 64.0, 72.0),
    GridZone('Zone IIA', 26.0, 74.0, 21.0, 29.0, 72.0, 78.0),
    GridZone('Zone IIB', 26.0, 84.0, 21.0, 29.0, 80.0, 88.0),
    GridZone('Zone IIIA', 19.0, 80.0, 15.0, 23.0, 76.0, 84.0),
    GridZone('Zone IIIB', 19.0, 84.0, 15.0, 23.0, 82.0, 90.0),
    GridZone('Zone IVA', 12.0, 80.0, 8.0, 16.0, 76.0, 84.0),
    GridZone('Zone IVB', 12.0, 84.0, 8.0, 16.0, 82.0, 90.0),
)

_ZONES_BY_NAME = {
    **{zone.name.upper(): zone for zone in ZONES},
    **{zone.code.upper(): zone for zone in ZONES},
}


def resolve_zone(latitude: float, longitude: float) -> Union[GridZone, NoZoneFound]:
    """
    Find the zone covering a point.

    Zones are tested in catalog order and the first whose bounding box contains
    the point is returned, so overlapping zones always resolve to the earlier one.

    Args:
        latitude:
            Latitude, in decimal degrees

        longitude:
            Longitude, in decimal degrees

    Returns:
        The matching GridZone, or NO_ZONE if the point is outside grid coverage
    """
    for zone in ZONES:
        if zone.contains(latitude, longitude):
            return zone

    return NO_ZONE


def get_zone(name: str) -> GridZone:
    """
    Look up a zone by display name ('Zone IIA') or code ('IIA'), case-insensitive.

    Raises:
        KeyError if no zone goes by that name
    """
    try:
        return _ZONES_BY_NAME[name.strip().upper()]
    except KeyError:
        raise KeyError(f'Unknown grid zone {name!r}') from None


def zones_in_bounds(
    min_lat: float,
    max_lat: float,
    min_lon: float,
    max_lon: float,
) -> Tuple[GridZone, ...]:
    """
    All zones whose bounding boxes intersect a geographic box (e.g. a map
    viewport), in catalog order.
    """
    return tuple(
        zone for zone in ZONES
        if zone.overlaps(min_lat, max_lat, min_lon, max_lon)
    )


def is_within_grid_bounds(latitude: float, longitude: float) -> bool:
    """Test whether any zone covers the point"""
    return not isinstance(resolve_zone(latitude, longitude), NoZoneFound)
