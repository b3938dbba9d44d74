"""
Display strings for grid and geographic coordinates
"""

__all__ = [
    'format_compact', 'format_coordinate', 'format_dms',
    'format_grid_coordinates', 'zone_description',
]

from indiangrid.geodesy import degrees_to_dms
from indiangrid.results import GridCoordinates
from indiangrid.zones import GridZone


def format_grid_coordinates(coordinates: GridCoordinates) -> str:
    """Full easting/northing in whole meters (truncated), e.g. 'E: 2743195  N: 914398'"""
    return f'E: {int(coordinates.easting)}  N: {int(coordinates.northing)}'


def format_compact(easting: float, northing: float) -> str:
    """Easting/northing in whole kilometers (truncated), e.g. '2743E 914N'"""
    return f'{int(easting / 1000)}E {int(northing / 1000)}N'


def format_dms(value: float, is_latitude: bool) -> str:
    """
    Format decimal degrees as zero-padded DMS with the hemisphere suffix,
    e.g. 28°36'50.00"N. Seconds are shown to two decimals.
    """
    degrees, minutes, seconds, hemisphere = degrees_to_dms(value, is_latitude)
    return f'{degrees:02d}°{minutes:02d}\'{seconds:05.2f}"{hemisphere}'


def format_coordinate(value: float, precision: int = 6) -> str:
    """Fixed-point decimal degrees"""
    return f'{value:.{precision}f}'


def zone_description(zone: GridZone) -> str:
    """e.g. 'Zone IIA (26.0°N, 74.0°E)'"""
    return zone.description
