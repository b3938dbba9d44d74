from pytest import approx

from indiangrid import GeographicPoint


def assert_points_equal(p1: GeographicPoint, p2: GeographicPoint, abs_tol=1e-9):
    """
    Asserts that two geographic points are equal within a specified absolute tolerance.

    Args:
        p1: The first GeographicPoint
        p2: The second GeographicPoint
        abs_tol: The absolute tolerance, in degrees, for floating point comparison.
    """
    try:
        assert p1.latitude == approx(p2.latitude, abs=abs_tol)
        assert p1.longitude == approx(p2.longitude, abs=abs_tol)
    except AssertionError as e:
        print(p1.latitude, p1.longitude)
        print(p2.latitude, p2.longitude)
        raise e
