from pytest import approx

from chinacoords import Coordinate


def assert_coordinates_equal(c1: Coordinate, c2: Coordinate, abs_tol=1e-7):
    """
    Asserts that two coordinates are equal within a specified absolute tolerance.

    Args:
        c1: The first Coordinate
        c2: The second Coordinate
        abs_tol: The absolute tolerance for floating point comparison.
                 Default is 1e-7 (approx 1.1cm at the equator).
    """
    try:
        assert c1.longitude == approx(c2.longitude, abs=abs_tol)
        assert c1.latitude == approx(c2.latitude, abs=abs_tol)

        # Z and M are carried through conversions untouched
        assert c1.z == c2.z
        assert c1.m == c2.m
    except AssertionError as e:
        print(c1.longitude, c1.latitude)
        print(c2.longitude, c2.latitude)
        raise e


# lng in [73, 135], lat in [3, 53]
CHINA_GRID = [
    Coordinate(lng, lat)
    for lng in range(73, 136, 4)
    for lat in range(3, 54, 5)
]

BEIJING = Coordinate(116.404, 39.915)
