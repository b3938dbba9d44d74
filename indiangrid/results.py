"""
Value types returned by the forward and inverse projections, including the
named absences that stand in for "no result"
"""
from __future__ import annotations

__all__ = [
    'ForwardResult', 'GeographicPoint', 'GridCoordinates', 'InvalidGridInput',
    'InverseResult', 'NO_ZONE', 'NoZoneFound',
]

from typing import TYPE_CHECKING, Tuple, Union

from indiangrid.utils.functions import round_half_up

if TYPE_CHECKING:
    from indiangrid.zones import GridZone


class _Frozen:
    """Rejects attribute assignment after construction"""

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def _init(self, **kwargs):
        for key, value in kwargs.items():
            object.__setattr__(self, key, value)


class GeographicPoint(_Frozen):
    """A latitude/longitude pair, in decimal degrees"""

    def __init__(self, latitude: float, longitude: float):
        self._init(latitude=float(latitude), longitude=float(longitude))

    def __eq__(self, other):
        if not isinstance(other, GeographicPoint):
            return False

        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeographicPoint({self.latitude}, {self.longitude})>'

    def __iter__(self):
        yield self.latitude
        yield self.longitude

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lon: Tuple[int, int, float, str]):
        """
        Creates a GeographicPoint from a Degree Minutes Seconds (lat, lon) pair.

        The hemisphere value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (int),  <minutes> (int), <seconds> (float), <hemisphere> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (int),  <minutes> (int), <seconds> (float), <hemisphere> (str) )

        Returns:
            GeographicPoint
        """
        from indiangrid.geodesy import dms_to_degrees  # pylint: disable=import-outside-toplevel

        return GeographicPoint(dms_to_degrees(*lat), dms_to_degrees(*lon))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert to (latitude, longitude) tuples of degrees, minutes, seconds, hemisphere
        """
        from indiangrid.geodesy import degrees_to_dms  # pylint: disable=import-outside-toplevel

        return (
            degrees_to_dms(self.latitude, is_latitude=True),
            degrees_to_dms(self.longitude, is_latitude=False),
        )

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)
        """
        if reverse:
            return self.longitude, self.latitude

        return self.latitude, self.longitude

    def rounded(self, precision: int = 9) -> GeographicPoint:
        """Returns a copy rounded half-up to the given number of decimals"""
        return GeographicPoint(
            round_half_up(self.latitude, precision),
            round_half_up(self.longitude, precision),
        )


class GridCoordinates(_Frozen):
    """
    The result of projecting a geographic point onto the grid.

    Attributes:
        easting: meters
        northing: meters
        zone: the GridZone the point was projected in
        convergence: grid convergence, in degrees
        scale_factor: point scale factor (dimensionless)
    """

    def __init__(
        self,
        easting: float,
        northing: float,
        zone: GridZone,
        convergence: float,
        scale_factor: float,
    ):
        self._init(
            easting=easting,
            northing=northing,
            zone=zone,
            convergence=convergence,
            scale_factor=scale_factor,
        )

    def __eq__(self, other):
        if not isinstance(other, GridCoordinates):
            return False

        return (
            self.easting == other.easting and
            self.northing == other.northing and
            self.zone == other.zone and
            self.convergence == other.convergence and
            self.scale_factor == other.scale_factor
        )

    def __hash__(self):
        return hash((self.easting, self.northing, self.zone, self.convergence, self.scale_factor))

    def __repr__(self):
        return (
            f'<GridCoordinates({self.easting}, {self.northing}, {self.zone.name}, '
            f'convergence={self.convergence}, scale_factor={self.scale_factor})>'
        )


class NoZoneFound(_Frozen):
    """The point lies outside every cataloged zone"""

    def __bool__(self):
        return False

    def __eq__(self, other):
        return isinstance(other, NoZoneFound)

    def __hash__(self):
        return hash(NoZoneFound)

    def __repr__(self):
        return '<NoZoneFound>'


class InvalidGridInput(_Frozen):
    """
    The (easting, northing, zone) triple could not be converted.

    Reasons:
        negative: easting or northing below zero; nothing was computed
        non_finite: the solver produced a non-finite latitude or longitude
        out_of_zone: the recovered point lies outside the zone's bounding box
    """

    NEGATIVE = 'negative'
    NON_FINITE = 'non_finite'
    OUT_OF_ZONE = 'out_of_zone'

    def __init__(self, reason: str):
        self._init(reason=reason)

    def __bool__(self):
        return False

    def __eq__(self, other):
        if not isinstance(other, InvalidGridInput):
            return False

        return self.reason == other.reason

    def __hash__(self):
        return hash((InvalidGridInput, self.reason))

    def __repr__(self):
        return f'<InvalidGridInput({self.reason})>'


NO_ZONE = NoZoneFound()

ForwardResult = Union[GridCoordinates, NoZoneFound]
InverseResult = Union[GeographicPoint, InvalidGridInput]
