import logging

import numpy as np
import pytest

from chinacoords import Coordinate, CoordType, UnsupportedConversion
from chinacoords import transform
from chinacoords.conversion import *

from tests.functions import BEIJING, CHINA_GRID, assert_coordinates_equal


_PAIRS = [
    ('gps84', 'gcj02', transform.wgs84_to_gcj02),
    ('gps84', 'bd09', transform.wgs84_to_bd09),
    ('gcj02', 'gps84', transform.gcj02_to_wgs84),
    ('gcj02', 'bd09', transform.gcj02_to_bd09),
    ('bd09', 'gps84', transform.bd09_to_wgs84),
    ('bd09', 'gcj02', transform.bd09_to_gcj02),
]


@pytest.mark.parametrize('coord_type', ['gps84', 'gcj02', 'bd09', *CoordType])
def test_convert_array_identity(coord_type):
    points = [Coordinate(116.404, 39.915), (121.4737, 31.2304)]
    assert convert_array(points, coord_type, coord_type) is points

    empty = []
    assert convert_array(empty, coord_type, coord_type) is empty


def test_convert_array_identity_mixed_tags():
    points = [BEIJING]
    assert convert_array(points, CoordType.GCJ02, 'gcj02') is points
    assert convert_array(points, 'bd09', CoordType.BD09) is points


@pytest.mark.parametrize('from_type, to_type', [
    ('wgs84', 'gcj02'),
    ('GPS84', 'gcj02'),
    ('gps84', 'GCJ02'),
    (' bd09', 'gps84'),
    ('WGS84', 'gps84'),
])
def test_convert_array_tags_outside_closed_set(from_type, to_type):
    points = [BEIJING]
    with pytest.raises(UnsupportedConversion) as exc:
        convert_array(points, from_type, to_type)

    assert exc.value.from_type == from_type
    assert exc.value.to_type == to_type
    assert points == [BEIJING]


@pytest.mark.parametrize('from_type, to_type, fn', _PAIRS)
def test_convert_array(from_type, to_type, fn):
    result = convert_array(CHINA_GRID, from_type, to_type)
    assert len(result) == len(CHINA_GRID)
    for point, converted in zip(CHINA_GRID, result):
        assert converted == fn(point.longitude, point.latitude)

    # Same result when addressed by enum member
    assert convert_array(CHINA_GRID, CoordType(from_type), CoordType(to_type)) == result


@pytest.mark.parametrize('from_type, to_type, fn', _PAIRS)
def test_convert_array_empty(from_type, to_type, fn):
    assert convert_array([], from_type, to_type) == []


def test_convert_array_point_shapes():
    expected = transform.wgs84_to_gcj02(116.404, 39.915)
    result = convert_array(
        [
            Coordinate(116.404, 39.915),
            (116.404, 39.915),
            [116.404, 39.915],
            {'lng': 116.404, 'lat': 39.915},
        ],
        'gps84',
        'gcj02'
    )
    assert result == [expected] * 4


def test_convert_array_preserves_order():
    points = [(100. + i, 30. + i / 10) for i in range(10)]
    result = convert_array(points, 'gps84', 'bd09')
    assert result == [transform.wgs84_to_bd09(*p) for p in points]


def test_convert_array_does_not_modify_input():
    points = [Coordinate(116.404, 39.915), (121.4737, 31.2304)]
    original = list(points)
    convert_array(points, 'bd09', 'gps84')
    assert points == original


def test_convert_array_unsupported():
    points = [Coordinate(116.404, 39.915)]
    with pytest.raises(UnsupportedConversion) as exc:
        convert_array(points, 'gps84', 'unknown')

    assert exc.value.from_type == 'gps84'
    assert exc.value.to_type == 'unknown'
    assert 'gps84' in str(exc.value)
    assert 'unknown' in str(exc.value)
    assert points == [Coordinate(116.404, 39.915)]

    with pytest.raises(UnsupportedConversion):
        convert_array(points, 'unknown', CoordType.BD09)

    with pytest.raises(UnsupportedConversion):
        convert_array([], None, 'gcj02')

    # Raised as a ValueError subclass
    with pytest.raises(ValueError):
        convert_array(points, 'epsg:4326', 'gcj02')


def test_convert_array_fails_before_converting():
    # A malformed point would raise something other than UnsupportedConversion
    with pytest.raises(UnsupportedConversion):
        convert_array([object()], 'gps84', 'mars')


def test_convert_array_unknown_identity():
    # Equal tags short-circuit even if they name no system
    points = [BEIJING]
    assert convert_array(points, 'unknown', 'unknown') is points


def test_convert_array_zm(caplog, monkeypatch):
    monkeypatch.setattr('chinacoords.utils.logging._WARNINGS', set())
    point = Coordinate(116.404, 39.915, z=43.5, m=1.)
    result = convert_array([point], 'gps84', 'gcj02')
    assert result[0].z == 43.5
    assert result[0].m == 1.
    assert 'Z/M values' in caplog.text


def test_convert_array_logs_debug(caplog):
    caplog.set_level(logging.DEBUG, logger='chinacoords')
    convert_array([BEIJING, BEIJING], CoordType.GPS84, CoordType.GCJ02)
    assert 'Converted 2 points from gps84 to gcj02' in caplog.text


def test_convert_array_ndarray():
    arr = np.array([c.to_float() for c in CHINA_GRID])
    result = convert_array(arr, 'gps84', 'bd09')
    assert isinstance(result, np.ndarray)
    assert result.shape == arr.shape
    for row, coord in zip(result, CHINA_GRID):
        assert_coordinates_equal(
            Coordinate(*row),
            transform.wgs84_to_bd09(coord.longitude, coord.latitude),
            abs_tol=1e-10
        )

    # Input untouched
    assert np.array_equal(arr, np.array([c.to_float() for c in CHINA_GRID]))
    assert convert_array(arr, 'bd09', 'bd09') is arr


def test_convert_ndarray():
    arr = np.array([[116.404, 39.915], [121.4737, 31.2304]])
    result = convert_ndarray(arr, 'gcj02', 'gps84')
    assert_coordinates_equal(Coordinate(*result[0]), transform.gcj02_to_wgs84(116.404, 39.915), 1e-10)

    # Plain nested lists are accepted
    result = convert_ndarray([[116.404, 39.915]], 'gcj02', 'gps84')
    assert result.shape == (1, 2)

    assert convert_ndarray(np.empty((0, 2)), 'gps84', 'gcj02').shape == (0, 2)

    with pytest.raises(ValueError):
        convert_ndarray(np.array([116.404, 39.915, 0.]), 'gps84', 'gcj02')

    with pytest.raises(UnsupportedConversion):
        convert_ndarray(arr, 'gps84', 'nope')


def test_get_converter():
    for from_type, to_type, fn in _PAIRS:
        assert get_converter(from_type, to_type) is fn

    identity = get_converter('gcj02', CoordType.GCJ02)
    assert identity(116.404, 39.915) == Coordinate(116.404, 39.915)

    with pytest.raises(UnsupportedConversion):
        get_converter('gps84', 'gps85')


def test_convert_coordinate():
    result = convert_coordinate(Coordinate(116.404, 39.915, z=10.), 'gps84', 'gcj02')
    assert_coordinates_equal(
        result,
        Coordinate(116.41024449916938, 39.91640428150164, z=10.),
        abs_tol=1e-9
    )

    assert convert_coordinate((116.404, 39.915), 'bd09', 'bd09') == Coordinate(116.404, 39.915)


def test_iter_convert():
    it = iter_convert(CHINA_GRID, 'gcj02', 'bd09')
    assert list(it) == [transform.gcj02_to_bd09(*c) for c in CHINA_GRID]

    # Pair is resolved eagerly
    with pytest.raises(UnsupportedConversion):
        iter_convert(CHINA_GRID, 'gcj02', 'baidu')


def test_convert_array_iterables():
    lngs, lats = [116.404, 121.4737], [39.915, 31.2304]
    expected = [transform.wgs84_to_gcj02(x, y) for x, y in zip(lngs, lats)]

    assert convert_array(zip(lngs, lats), 'gps84', 'gcj02') == expected
    assert convert_array(((x, y) for x, y in zip(lngs, lats)), 'gps84', 'gcj02') == expected
    assert convert_array(map(Coordinate, lngs, lats), 'gps84', 'gcj02') == expected
    assert convert_array(iter([]), 'gps84', 'gcj02') == []


def test_convert_array_iterable_logs_debug(caplog):
    caplog.set_level(logging.DEBUG, logger='chinacoords')
    convert_array((p for p in [BEIJING] * 3), 'gps84', 'bd09')
    assert 'Converted 3 points from gps84 to bd09' in caplog.text
