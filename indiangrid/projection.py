"""
Lambert Conformal Conic projection between geographic coordinates and the
Indian Grid, in both directions.

The forward projection is closed-form. The inverse recovers longitude directly
and latitude through a capped fixed-point iteration on the isometric latitude.
Both directions share the cone parameters derived from a zone by
lcc_parameters(), so a point projected and unprojected in the same zone
returns to where it started.
"""
from __future__ import annotations

__all__ = [
    'forward', 'forward_array', 'inverse', 'inverse_array', 'lcc_parameters',
]

import math
from typing import Optional, Tuple

import numpy as np
from pydantic import validate_call

from indiangrid._const import (
    CONVERGENCE_TOLERANCE, FALSE_EASTING, FALSE_NORTHING, K0, MAX_ITERATIONS
)
from indiangrid.ellipsoid import EVEREST_1830
from indiangrid.results import (
    ForwardResult, GeographicPoint, GridCoordinates, InvalidGridInput,
    InverseResult, NoZoneFound,
)
from indiangrid.utils.logging import LOGGER, warn_once
from indiangrid.zones import GridZone, resolve_zone

_ELLIPSOID = EVEREST_1830


def lcc_parameters(zone: GridZone) -> Tuple[float, float, float]:
    """
    Derive the cone parameters for a zone from its standard parallels.

    Args:
        zone:
            The GridZone

    Returns:
        A tuple of (n, F, rho0): the cone constant, the scale constant, and the
        projected radius of the zone's origin latitude in meters
    """
    phi1, phi2 = (math.radians(x) for x in zone.standard_parallels)

    n = (
        math.log(math.cos(phi1) / math.cos(phi2)) /
        math.log(math.tan(math.pi / 4 + phi2 / 2) / math.tan(math.pi / 4 + phi1 / 2))
    )
    F = math.cos(phi1) * math.tan(math.pi / 4 + phi1 / 2) ** n / n
    rho0 = _radius(math.radians(zone.origin_lat), n, F)

    return n, F, float(rho0)


def _radius(latitude, n: float, F: float):
    """Projected radius of a parallel; latitude in radians (float or array)"""
    return _ELLIPSOID.a * F * np.exp(-n * _ELLIPSOID.isometric_latitude(latitude))


@validate_call(config=dict(arbitrary_types_allowed=True))
def forward(
    latitude: float,
    longitude: float,
    zone: Optional[GridZone] = None,
) -> ForwardResult:
    """
    Project a geographic point onto the Indian Grid.

    The input is treated as lying on the Everest 1830 ellipsoid; no datum
    shift from WGS84 is applied.

    Args:
        latitude:
            Latitude in decimal degrees, strictly between -90 and 90

        longitude:
            Longitude in decimal degrees

        zone: (Optional)
            The zone to project in. If omitted, the zone is resolved from the
            point, see indiangrid.zones.resolve_zone

    Returns:
        GridCoordinates, or NO_ZONE if no zone was given and none covers the point
    """
    warn_once(
        'Geographic coordinates are projected as-is on the Everest 1830 ellipsoid; '
        'no WGS84 datum shift is applied. (this warning will not repeat)'
    )
    if zone is None:
        resolved = resolve_zone(latitude, longitude)
        if isinstance(resolved, NoZoneFound):
            LOGGER.debug('No grid zone covers (%s, %s)', latitude, longitude)
            return resolved
        zone = resolved

    lat = math.radians(latitude)
    lon = math.radians(longitude)
    lon0 = math.radians(zone.origin_lon)

    n, F, rho0 = lcc_parameters(zone)
    rho = float(_radius(lat, n, F))
    theta = n * (lon - lon0)

    easting = FALSE_EASTING + K0 * rho * math.sin(theta)
    northing = FALSE_NORTHING + K0 * (rho0 - rho * math.cos(theta))

    nu = float(_ELLIPSOID.radius_of_curvature_prime_vertical(lat))
    scale_factor = K0 * n * rho / (nu * math.cos(lat))

    return GridCoordinates(
        easting=easting,
        northing=northing,
        zone=zone,
        convergence=math.degrees(theta),
        scale_factor=scale_factor,
    )


@validate_call(config=dict(arbitrary_types_allowed=True))
def inverse(
    easting: float,
    northing: float,
    zone: GridZone,
    max_iterations: int = MAX_ITERATIONS,
) -> InverseResult:
    """
    Recover the geographic point for grid coordinates in a given zone.

    The zone cannot be inferred from (easting, northing) alone, since every zone
    shares the same false origin.

    Args:
        easting:
            Grid easting, in meters

        northing:
            Grid northing, in meters

        zone:
            The zone the coordinates belong to

        max_iterations: (Default 3)
            Upper bound on latitude refinement steps. Iteration stops earlier
            once successive estimates agree within 1e-12 radians.

    Returns:
        GeographicPoint, or an InvalidGridInput when the coordinates are negative
        or the recovered point falls outside the zone
    """
    if easting < 0 or northing < 0:
        LOGGER.debug('Rejected negative grid coordinates (%s, %s)', easting, northing)
        return InvalidGridInput(InvalidGridInput.NEGATIVE)

    lon0 = math.radians(zone.origin_lon)
    n, F, rho0 = lcc_parameters(zone)

    x = (easting - FALSE_EASTING) / K0
    y = rho0 - (northing - FALSE_NORTHING) / K0

    theta = math.atan2(x, y)
    lon = lon0 + theta / n

    rho = math.copysign(math.hypot(x, y), n)
    t = (rho / (_ELLIPSOID.a * F)) ** (1 / n)

    lat = math.pi / 2 - 2 * math.atan(t)
    for _ in range(max_iterations):
        next_lat = float(_ELLIPSOID.conformal_latitude_step(lat, t))
        converged = abs(next_lat - lat) < CONVERGENCE_TOLERANCE
        lat = next_lat
        if converged:
            break
    else:
        LOGGER.debug(
            'Latitude solver stopped after %d iterations without meeting tolerance',
            max_iterations
        )

    latitude, longitude = math.degrees(lat), math.degrees(lon)
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        LOGGER.debug('Non-finite result for (%s, %s) in %s', easting, northing, zone.name)
        return InvalidGridInput(InvalidGridInput.NON_FINITE)

    if not zone.contains(latitude, longitude):
        LOGGER.debug(
            '(%s, %s) resolves to (%s, %s), outside %s',
            easting, northing, latitude, longitude, zone.name
        )
        return InvalidGridInput(InvalidGridInput.OUT_OF_ZONE)

    return GeographicPoint(latitude, longitude)


def forward_array(latitudes, longitudes, zone: GridZone):
    """
    Project many points onto the grid in a single zone.

    Args:
        latitudes:
            Array-like of latitudes, in decimal degrees

        longitudes:
            Array-like of longitudes, in decimal degrees (broadcast against latitudes)

        zone:
            The zone to project in. Points are not checked against its bounds.

    Returns:
        A tuple of numpy arrays (easting, northing, convergence, scale_factor)
    """
    lat = np.radians(np.asarray(latitudes, dtype=float))
    lon = np.radians(np.asarray(longitudes, dtype=float))
    lon0 = math.radians(zone.origin_lon)

    n, F, rho0 = lcc_parameters(zone)
    with np.errstate(invalid='ignore', divide='ignore', over='ignore'):
        rho = _radius(lat, n, F)
        theta = n * (lon - lon0)

        easting = FALSE_EASTING + K0 * rho * np.sin(theta)
        northing = FALSE_NORTHING + K0 * (rho0 - rho * np.cos(theta))
        scale_factor = K0 * n * rho / (
            _ELLIPSOID.radius_of_curvature_prime_vertical(lat) * np.cos(lat)
        )

    return easting, northing, np.degrees(theta), scale_factor


def inverse_array(eastings, northings, zone: GridZone, max_iterations: int = MAX_ITERATIONS):
    """
    Recover geographic points for many grid coordinates in a single zone.

    Elements that inverse() would reject (negative input, non-finite result, or
    a point outside the zone) are NaN in both output arrays.

    Args:
        eastings:
            Array-like of eastings, in meters

        northings:
            Array-like of northings, in meters (broadcast against eastings)

        zone:
            The zone the coordinates belong to

        max_iterations: (Default 3)
            Upper bound on latitude refinement steps; stops early once every
            element has converged

    Returns:
        A tuple of numpy arrays (latitude, longitude), in decimal degrees
    """
    easting, northing = np.broadcast_arrays(
        np.asarray(eastings, dtype=float),
        np.asarray(northings, dtype=float),
    )
    lon0 = math.radians(zone.origin_lon)
    n, F, rho0 = lcc_parameters(zone)

    with np.errstate(invalid='ignore', divide='ignore', over='ignore'):
        x = (easting - FALSE_EASTING) / K0
        y = rho0 - (northing - FALSE_NORTHING) / K0

        lon = lon0 + np.arctan2(x, y) / n
        t = (np.copysign(np.hypot(x, y), n) / (_ELLIPSOID.a * F)) ** (1 / n)

        lat = np.pi / 2 - 2 * np.arctan(t)
        for _ in range(max_iterations):
            next_lat = _ELLIPSOID.conformal_latitude_step(lat, t)
            # NaN elements count as settled
            settled = ~(np.abs(next_lat - lat) >= CONVERGENCE_TOLERANCE)
            lat = next_lat
            if settled.all():
                break

        latitude, longitude = np.degrees(lat), np.degrees(lon)
        valid = (
            (easting >= 0) & (northing >= 0) &
            (latitude >= zone.min_lat) & (latitude <= zone.max_lat) &
            (longitude >= zone.min_lon) & (longitude <= zone.max_lon)
        )

    return np.where(valid, latitude, np.nan), np.where(valid, longitude, np.nan)
