"""
Auxiliary geodesy: distances, bearings, destinations and DMS conversion.

These work on plain latitude/longitude values and are independent of the grid
projection. The haversine family assumes a spherical earth of mean radius; the
Vincenty family works on a reference ellipsoid (WGS84 unless given).
"""

__all__ = [
    'bearing_degrees', 'degrees_to_dms', 'distance_meters', 'dms_to_degrees',
    'haversine_bearing', 'haversine_destination', 'haversine_distance',
    'set_geodesic_algorithm', 'vincenty_bearing', 'vincenty_distance',
]

import math
from typing import Literal, Tuple

from indiangrid._const import EARTH_RADIUS_METERS
from indiangrid.ellipsoid import WGS84, Ellipsoid
from indiangrid.utils.functions import round_half_up
from indiangrid.utils.logging import LOGGER


# -------------------------------------------------------------------------
# Haversine Implementation (Spherical)
# -------------------------------------------------------------------------

def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in meters using the Haversine formula (spherical earth)."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = (math.sin(dlat / 2) ** 2 +
         math.cos(phi1) * math.cos(phi2) * math.sin(dlon / 2) ** 2)
    # Rounding can push a just past 1 for antipodal points
    a = min(max(a, 0.), 1.)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_METERS * c


def haversine_destination(
        lat: float,
        lon: float,
        bearing: float,
        distance: float,
) -> Tuple[float, float]:
    """
    Calculate the destination point using spherical trigonometry.

    Args:
        lat:
            Starting latitude, in decimal degrees

        lon:
            Starting longitude, in decimal degrees

        bearing:
            Direction of travel, in degrees clockwise from north

        distance:
            Distance travelled, in meters

    Returns:
        (latitude, longitude) of the destination, longitude normalized to [-180, 180)
    """
    phi1 = math.radians(lat)
    lambda1 = math.radians(lon)
    bearing_rad = math.radians(bearing)

    ang_dist = distance / EARTH_RADIUS_METERS

    phi2 = math.asin(math.sin(phi1) * math.cos(ang_dist) +
                     math.cos(phi1) * math.sin(ang_dist) * math.cos(bearing_rad))

    lambda2 = lambda1 + math.atan2(math.sin(bearing_rad) * math.sin(ang_dist) * math.cos(phi1),
                                   math.cos(ang_dist) - math.sin(phi1) * math.sin(phi2))

    return math.degrees(phi2), (math.degrees(lambda2) + 540) % 360 - 180


def haversine_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate initial bearing in degrees [0, 360) using spherical trigonometry."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dlon = math.radians(lon2 - lon1)

    y = math.sin(dlon) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(dlon)

    return (math.degrees(math.atan2(y, x)) + 360) % 360


# -------------------------------------------------------------------------
# Vincenty Implementation (Ellipsoidal)
# -------------------------------------------------------------------------

def _vincenty_inverse(
    lat1: float, lon1: float, lat2: float, lon2: float, ellipsoid: Ellipsoid
):
    """
    Solves Vincenty's inverse problem.

    Returns:
        (distance meters, initial bearing degrees), or None if the iteration
        failed to converge (usually nearly antipodal points)
    """
    f, a, b = ellipsoid.f, ellipsoid.a, ellipsoid.b

    U1 = math.atan((1 - f) * math.tan(math.radians(lat1)))
    U2 = math.atan((1 - f) * math.tan(math.radians(lat2)))
    L = math.radians(lon2 - lon1)
    Lambda = L

    sinU1, cosU1 = math.sin(U1), math.cos(U1)
    sinU2, cosU2 = math.sin(U2), math.cos(U2)

    MAX_ITER = 200
    for _ in range(MAX_ITER):
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)
        sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                             (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

        if sinSigma == 0:
            return 0.0, 0.0  # Coincident points

        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda
        sigma = math.atan2(sinSigma, cosSigma)
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        try:
            cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
        except ZeroDivisionError:
            cos2SigmaM = 0  # Equatorial line

        C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
        Lambda_prev = Lambda
        Lambda = L + (1 - C) * f * sinAlpha * (
                sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        if abs(Lambda - Lambda_prev) < 1e-12:
            break
    else:
        return None

    uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)
    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))
    deltaSigma = B * sinSigma * (
            cos2SigmaM + B / 4 * (
                cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
                B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
            )
    )

    alpha1 = math.atan2(
        cosU2 * math.sin(Lambda),
        cosU1 * sinU2 - sinU1 * cosU2 * math.cos(Lambda)
    )

    return b * A * (sigma - deltaSigma), (math.degrees(alpha1) + 360) % 360


def vincenty_distance(
    lat1: float, lon1: float, lat2: float, lon2: float, ellipsoid: Ellipsoid = WGS84
) -> float:
    """
    Calculate distance in meters using Vincenty's inverse formula.
    Falls back to Haversine if convergence fails.
    """
    solved = _vincenty_inverse(lat1, lon1, lat2, lon2, ellipsoid)
    if solved is None:
        LOGGER.debug('Vincenty did not converge; falling back to haversine distance')
        return haversine_distance(lat1, lon1, lat2, lon2)

    return solved[0]


def vincenty_bearing(
    lat1: float, lon1: float, lat2: float, lon2: float, ellipsoid: Ellipsoid = WGS84
) -> float:
    """
    Calculate the initial bearing (forward azimuth) using Vincenty's inverse formula.

    Returns:
        float: Bearing in degrees [0, 360)
    """
    solved = _vincenty_inverse(lat1, lon1, lat2, lon2, ellipsoid)
    if solved is None:
        LOGGER.debug('Vincenty did not converge; falling back to haversine bearing')
        return haversine_bearing(lat1, lon1, lat2, lon2)

    return solved[1]


# -------------------------------------------------------------------------
# Degrees / Minutes / Seconds
# -------------------------------------------------------------------------

def degrees_to_dms(value: float, is_latitude: bool) -> Tuple[int, int, float, str]:
    """
    Convert a value (latitude or longitude) in decimal degrees to a tuple of
    degrees, minutes, seconds, hemisphere. Seconds are rounded to 5 decimals.

    Args:
        value:
            The decimal degrees

        is_latitude:
            Whether the value is a latitude (N/S) or a longitude (E/W)

    Returns:
        (degrees, minutes, seconds, hemisphere)
    """
    minutes, seconds = divmod(abs(value) * 3600, 60)
    degrees, minutes = divmod(minutes, 60)

    if is_latitude:
        hemisphere = 'N' if value >= 0 else 'S'
    else:
        hemisphere = 'E' if value >= 0 else 'W'

    return int(degrees), int(minutes), round_half_up(seconds, 5), hemisphere


def dms_to_degrees(degrees: float, minutes: float, seconds: float, hemisphere: str) -> float:
    """
    Convert degrees, minutes, seconds to decimal degrees. The sign comes from the
    hemisphere letter alone: 'S' and 'W' are negative, 'N' and 'E' positive.

    Raises:
        ValueError if the hemisphere is not one of N, S, E, W
    """
    hemisphere = hemisphere.strip().upper()
    if hemisphere not in ('N', 'S', 'E', 'W'):
        raise ValueError(f"Hemisphere must be one of 'N', 'S', 'E', 'W'; got {hemisphere!r}")

    mult = -1 if hemisphere in ('S', 'W') else 1
    return mult * (abs(degrees) + abs(minutes) / 60 + abs(seconds) / 3600)


# -------------------------------------------------------------------------
# Dynamic Dispatch & Configuration
# -------------------------------------------------------------------------

# These declare the distance algo in use (default haversine)
distance_meters = haversine_distance
bearing_degrees = haversine_bearing


_ALGORITHMS = {
    'haversine': (
        haversine_distance,
        haversine_bearing,
    ),
    'vincenty': (
        vincenty_distance,
        vincenty_bearing,
    ),
}


def set_geodesic_algorithm(algorithm: Literal['haversine', 'vincenty']):
    """
    Set the global geodesic calculation method used by distance_meters and
    bearing_degrees.

    Args:
        algorithm: 'haversine' or 'vincenty'
    """
    global distance_meters, bearing_degrees

    if algorithm not in _ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{algorithm}'. Options: {list(_ALGORITHMS.keys())}")

    distance_meters, bearing_degrees = _ALGORITHMS[algorithm]
    LOGGER.debug('Geodesic algorithm set to %s', algorithm)
