import math

import pytest
from pytest import approx

from indiangrid.ellipsoid import *


def test_ellipsoid_derived_parameters():
    f = 1 / 300.8017
    assert EVEREST_1830.a == 6377276.345
    assert EVEREST_1830.f == approx(f)
    assert EVEREST_1830.e2 == approx(2 * f - f * f)
    assert EVEREST_1830.e == approx(math.sqrt(2 * f - f * f))
    assert 0 < EVEREST_1830.e2 < 1
    assert EVEREST_1830.b == approx(6356075.413, abs=0.5)

    assert WGS84.b == approx(6356752.314245, abs=1e-6)


def test_ellipsoid_invalid():
    with pytest.raises(ValueError):
        Ellipsoid(-1., 300.)

    # f == 1 gives e2 == 1
    with pytest.raises(ValueError):
        Ellipsoid(6378137.0, 1.)


def test_ellipsoid_immutable():
    with pytest.raises(AttributeError):
        EVEREST_1830.a = 1.


def test_ellipsoid_eq_hash():
    assert Ellipsoid(6377276.345, 300.8017) == EVEREST_1830
    assert EVEREST_1830 != WGS84
    assert EVEREST_1830 != 6377276.345
    assert len({EVEREST_1830, Ellipsoid(6377276.345, 300.8017), WGS84}) == 2


def test_ellipsoid_repr():
    assert repr(EVEREST_1830) == '<Ellipsoid Everest 1830 (a=6377276.345, 1/f=300.8017)>'


def test_radius_of_curvature_prime_vertical():
    assert EVEREST_1830.radius_of_curvature_prime_vertical(0.) == approx(EVEREST_1830.a)
    assert EVEREST_1830.radius_of_curvature_prime_vertical(math.pi / 2) == approx(
        EVEREST_1830.a / math.sqrt(1 - EVEREST_1830.e2)
    )
    # Symmetric about the equator
    assert EVEREST_1830.radius_of_curvature_prime_vertical(0.4) == approx(
        EVEREST_1830.radius_of_curvature_prime_vertical(-0.4)
    )


def test_isometric_latitude():
    assert EVEREST_1830.isometric_latitude(0.) == approx(0., abs=1e-15)
    assert EVEREST_1830.isometric_latitude(-0.5) == approx(-EVEREST_1830.isometric_latitude(0.5))

    # Smaller than the spherical (Mercator) value away from the equator
    lat = math.radians(30)
    assert EVEREST_1830.isometric_latitude(lat) < math.log(math.tan(math.pi / 4 + lat / 2))


def test_conformal_latitude_step():
    lat = math.radians(26.)
    t = math.exp(-EVEREST_1830.isometric_latitude(lat))

    # The true latitude is a fixed point
    assert EVEREST_1830.conformal_latitude_step(lat, t) == approx(lat, abs=1e-14)

    # Each step moves a rough estimate closer
    estimate = math.pi / 2 - 2 * math.atan(t)
    improved = EVEREST_1830.conformal_latitude_step(estimate, t)
    assert abs(improved - lat) < abs(estimate - lat) / 100
