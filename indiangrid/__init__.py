
from indiangrid._version import __version__  # noqa: F401
from indiangrid.utils.logging import LOGGER
from indiangrid.ellipsoid import EVEREST_1830, WGS84, Ellipsoid
from indiangrid.results import (
    NO_ZONE, GeographicPoint, GridCoordinates, InvalidGridInput, NoZoneFound
)
from indiangrid.zones import (
    ZONES, GridZone, get_zone, is_within_grid_bounds, resolve_zone, zones_in_bounds
)
from indiangrid.projection import forward, forward_array, inverse, inverse_array


__all__ = [
    'EVEREST_1830',
    'Ellipsoid',
    'GeographicPoint',
    'GridCoordinates',
    'GridZone',
    'InvalidGridInput',
    'LOGGER',
    'NO_ZONE',
    'NoZoneFound',
    'WGS84',
    'ZONES',
    'forward',
    'forward_array',
    'get_zone',
    'inverse',
    'inverse_array',
    'is_within_grid_bounds',
    'resolve_zone',
    'zones_in_bounds',
]
