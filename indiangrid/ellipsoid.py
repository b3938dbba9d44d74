"""
Reference ellipsoid geometry shared by the forward and inverse projections
"""

__all__ = ['Ellipsoid', 'EVEREST_1830', 'WGS84']

from functools import cached_property
import math

import numpy as np

from indiangrid._const import EVEREST_A, EVEREST_INV_F, WGS84_A, WGS84_INV_F


class Ellipsoid:
    """
    An oblate reference ellipsoid, defined by its semi-major axis and inverse
    flattening. All other parameters are derived once and never mutated.

    Args:
        a:
            The semi-major axis, in meters

        inverse_flattening:
            The inverse flattening (1/f)

        name: (Optional)
            A display name for the ellipsoid
    """

    def __init__(self, a: float, inverse_flattening: float, name: str = ''):
        if a <= 0:
            raise ValueError(f'semi-major axis must be positive, got {a}')

        f = 1 / inverse_flattening
        e2 = 2 * f - f * f
        if not 0 < e2 < 1:
            raise ValueError(
                f'inverse flattening {inverse_flattening} yields an eccentricity '
                f'squared of {e2}; must be within (0, 1)'
            )

        object.__setattr__(self, 'a', float(a))
        object.__setattr__(self, 'inverse_flattening', float(inverse_flattening))
        object.__setattr__(self, 'name', name)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return (
            self.a == other.a and
            self.inverse_flattening == other.inverse_flattening
        )

    def __hash__(self):
        return hash((self.a, self.inverse_flattening))

    def __repr__(self):
        return f'<Ellipsoid {self.name or "unnamed"} (a={self.a}, 1/f={self.inverse_flattening})>'

    @cached_property
    def f(self) -> float:
        """Flattening"""
        return 1 / self.inverse_flattening

    @cached_property
    def b(self) -> float:
        """Semi-minor axis, in meters"""
        return (1 - self.f) * self.a

    @cached_property
    def e2(self) -> float:
        """Eccentricity squared"""
        return 2 * self.f - self.f * self.f

    @cached_property
    def e(self) -> float:
        """First eccentricity"""
        return math.sqrt(self.e2)

    def radius_of_curvature_prime_vertical(self, latitude):
        """
        Radius of curvature in the prime vertical (nu) at a given latitude.

        Args:
            latitude:
                The latitude, in radians (float or numpy array)

        Returns:
            the radius, in meters
        """
        return self.a / np.sqrt(1 - self.e2 * np.sin(latitude) ** 2)

    def isometric_latitude(self, latitude):
        """
        The isometric latitude (psi) at a given geodetic latitude. Undefined at
        the poles.

        Args:
            latitude:
                The latitude, in radians (float or numpy array)

        Returns:
            the isometric latitude
        """
        esin = self.e * np.sin(latitude)
        return np.log(
            np.tan(np.pi / 4 + latitude / 2) *
            ((1 - esin) / (1 + esin)) ** (self.e / 2)
        )

    def conformal_latitude_step(self, latitude, t):
        """
        A single fixed-point update inverting the isometric latitude, given
        the conformal parameter t = exp(-psi).

        Args:
            latitude:
                The current latitude estimate, in radians (float or numpy array)

            t:
                The conformal parameter recovered from the projected radius

        Returns:
            the next latitude estimate, in radians
        """
        esin = self.e * np.sin(latitude)
        return np.pi / 2 - 2 * np.arctan(
            t * ((1 - esin) / (1 + esin)) ** (self.e / 2)
        )


EVEREST_1830 = Ellipsoid(EVEREST_A, EVEREST_INV_F, 'Everest 1830')
WGS84 = Ellipsoid(WGS84_A, WGS84_INV_F, 'WGS84')
