"""
Module for batch conversion between coordinate systems
"""
__all__ = [
    'convert_array', 'convert_coordinate', 'convert_ndarray',
    'get_converter', 'iter_convert',
]

from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Sequence, Tuple, Union

import numpy as np

from chinacoords import transform, vectorized
from chinacoords.coord_types import CoordType
from chinacoords.coordinates import Coordinate
from chinacoords.exceptions import UnsupportedConversion
from chinacoords.utils.logging import LOGGER, warn_once

_POINT_TYPE = Union[Coordinate, Sequence[float], Mapping[str, float]]
_CONVERTER_TYPE = Callable[[float, float], Coordinate]

_CONVERSIONS: Dict[Tuple[CoordType, CoordType], Tuple[_CONVERTER_TYPE, Callable]] = {
    (CoordType.GPS84, CoordType.GCJ02): (transform.wgs84_to_gcj02, vectorized.wgs84_to_gcj02),
    (CoordType.GPS84, CoordType.BD09): (transform.wgs84_to_bd09, vectorized.wgs84_to_bd09),
    (CoordType.GCJ02, CoordType.GPS84): (transform.gcj02_to_wgs84, vectorized.gcj02_to_wgs84),
    (CoordType.GCJ02, CoordType.BD09): (transform.gcj02_to_bd09, vectorized.gcj02_to_bd09),
    (CoordType.BD09, CoordType.GPS84): (transform.bd09_to_wgs84, vectorized.bd09_to_wgs84),
    (CoordType.BD09, CoordType.GCJ02): (transform.bd09_to_gcj02, vectorized.bd09_to_gcj02),
}


def _identity(lng: float, lat: float) -> Coordinate:
    return Coordinate(lng, lat)


def _is_identity(from_type: Any, to_type: Any) -> bool:
    if from_type == to_type:
        return True

    parsed = CoordType.parse(from_type)
    return parsed is not None and parsed is CoordType.parse(to_type)


def _lookup(from_type: Any, to_type: Any):
    """Resolve the (scalar, vectorized) function pair for a conversion"""
    key = (CoordType.parse(from_type), CoordType.parse(to_type))
    if key not in _CONVERSIONS:
        raise UnsupportedConversion(from_type, to_type)

    return _CONVERSIONS[key]


def _as_coordinate(point: _POINT_TYPE) -> Coordinate:
    if isinstance(point, Coordinate):
        if point.z is not None or point.m is not None:
            warn_once(
                'Z/M values are not affected by coordinate system conversion and will be '
                'carried through unchanged.'
            )
        return point

    if isinstance(point, Mapping):
        return Coordinate(point['lng'], point['lat'])

    lng, lat = point
    return Coordinate(lng, lat)


def get_converter(from_type: Union[CoordType, str], to_type: Union[CoordType, str]) -> _CONVERTER_TYPE:
    """
    Get the single-point conversion function for a pair of coordinate systems.

    Args:
        from_type:
            The source coordinate system, e.g. CoordType.GPS84 or 'gps84'

        to_type:
            The destination coordinate system

    Returns:
        A function of (lng, lat) returning a Coordinate. Equal systems yield a
        function that returns the point unchanged.

    Raises:
        UnsupportedConversion: if either tag is not a known coordinate system
    """
    if _is_identity(from_type, to_type):
        return _identity

    return _lookup(from_type, to_type)[0]


def convert_coordinate(
    coord: _POINT_TYPE,
    from_type: Union[CoordType, str],
    to_type: Union[CoordType, str],
) -> Coordinate:
    """
    Convert one point between coordinate systems, keeping any Z/M values.

    Args:
        coord:
            A Coordinate, (lng, lat) pair or {'lng': ..., 'lat': ...} mapping

        from_type:
            The source coordinate system

        to_type:
            The destination coordinate system

    Returns:
        Coordinate
    """
    converter = get_converter(from_type, to_type)
    coord = _as_coordinate(coord)
    converted = converter(coord.longitude, coord.latitude)
    return coord.with_lnglat(converted.longitude, converted.latitude)


def iter_convert(
    points: Iterable[_POINT_TYPE],
    from_type: Union[CoordType, str],
    to_type: Union[CoordType, str],
) -> Iterator[Coordinate]:
    """
    Lazily convert a sequence of points. The conversion pair is resolved when
    this function is called, not when the iterator is first advanced.

    Raises:
        UnsupportedConversion: if the pair of tags is not a known conversion
    """
    converter = get_converter(from_type, to_type)

    def _gen():
        for point in points:
            coord = _as_coordinate(point)
            converted = converter(coord.longitude, coord.latitude)
            yield coord.with_lnglat(converted.longitude, converted.latitude)

    return _gen()


def convert_ndarray(
    arr: np.ndarray,
    from_type: Union[CoordType, str],
    to_type: Union[CoordType, str],
) -> np.ndarray:
    """
    Convert an (N, 2) array of [lng, lat] rows between coordinate systems.

    Args:
        arr:
            Array-like of shape (N, 2)

        from_type:
            The source coordinate system

        to_type:
            The destination coordinate system

    Returns:
        A new float array of shape (N, 2), or `arr` itself when the systems match

    Raises:
        UnsupportedConversion: if the pair of tags is not a known conversion
        ValueError: if the array is not two columns wide
    """
    if _is_identity(from_type, to_type):
        return arr

    converter = _lookup(from_type, to_type)[1]
    out = converter(arr)
    LOGGER.debug('Converted %d rows from %s to %s', len(out), from_type, to_type)
    return out


def convert_array(
    points: Union[Iterable[_POINT_TYPE], np.ndarray],
    from_type: Union[CoordType, str],
    to_type: Union[CoordType, str],
) -> Union[List[Coordinate], Iterable[_POINT_TYPE], np.ndarray]:
    """
    Convert a batch of points from one coordinate system to another.

    When the systems match the input is returned as-is (not copied). Otherwise
    the conversion is resolved once, before any point is touched, and a new
    list of Coordinates in the same order is returned. numpy arrays of shape
    (N, 2) are converted in one vectorized pass and returned as a new array.

    Args:
        points:
            Any iterable of Coordinates, (lng, lat) pairs or
            {'lng': ..., 'lat': ...} mappings, or an (N, 2) numpy array

        from_type:
            The source coordinate system, e.g. CoordType.GPS84 or 'gps84'

        to_type:
            The destination coordinate system

    Returns:
        The converted points

    Raises:
        UnsupportedConversion: if the pair of tags is not a known conversion
    """
    if _is_identity(from_type, to_type):
        return points

    if isinstance(points, np.ndarray):
        return convert_ndarray(points, from_type, to_type)

    converter = _lookup(from_type, to_type)[0]
    out = []
    for point in points:
        coord = _as_coordinate(point)
        converted = converter(coord.longitude, coord.latitude)
        out.append(coord.with_lnglat(converted.longitude, converted.latitude))

    LOGGER.debug('Converted %d points from %s to %s', len(out), from_type, to_type)
    return out
