"""
Point conversions between WGS84 (gps84), GCJ02 and BD09.

Every function takes a longitude and latitude in decimal degrees and returns a
new Coordinate. The GCJ02 offset polynomials are empirical and only meaningful
within (roughly) mainland China; outside it they still return finite values.
"""

__all__ = [
    'bd09_to_gcj02', 'bd09_to_gps84', 'bd09_to_wgs84',
    'gcj02_to_bd09', 'gcj02_to_gps84', 'gcj02_to_wgs84',
    'gps84_to_bd09', 'gps84_to_gcj02', 'in_china',
    'wgs84_to_bd09', 'wgs84_to_gcj02',
]

import math

from chinacoords._const import (
    BD09_LAT_OFFSET, BD09_LNG_OFFSET, CHINA_BOUNDS,
    KRASOVSKY_A, KRASOVSKY_EE, PI, X_PI
)
from chinacoords.coordinates import Coordinate


def _transform_lat(x: float, y: float) -> float:
    """Raw latitude offset, with x/y centred on (105, 35)"""
    ret = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + 0.1 * x * y + 0.2 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * PI) + 20.0 * math.sin(2.0 * x * PI)) * 2.0 / 3.0
    ret += (20.0 * math.sin(y * PI) + 40.0 * math.sin(y / 3.0 * PI)) * 2.0 / 3.0
    ret += (160.0 * math.sin(y / 12.0 * PI) + 320 * math.sin(y * PI / 30.0)) * 2.0 / 3.0
    return ret


def _transform_lng(x: float, y: float) -> float:
    """Raw longitude offset, with x/y centred on (105, 35)"""
    ret = 300.0 + x + 2.0 * y + 0.1 * x * x + 0.1 * x * y + 0.1 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * PI) + 20.0 * math.sin(2.0 * x * PI)) * 2.0 / 3.0
    ret += (20.0 * math.sin(x * PI) + 40.0 * math.sin(x / 3.0 * PI)) * 2.0 / 3.0
    ret += (150.0 * math.sin(x / 12.0 * PI) + 300.0 * math.sin(x / 30.0 * PI)) * 2.0 / 3.0
    return ret


def in_china(lng: float, lat: float) -> bool:
    """
    Whether a point lies within the approximate bounding box the GCJ02 offsets
    were fitted over. Informational only; no conversion consults it.
    """
    min_lng, min_lat, max_lng, max_lat = CHINA_BOUNDS
    return min_lng <= lng <= max_lng and min_lat <= lat <= max_lat


def wgs84_to_gcj02(lng: float, lat: float) -> Coordinate:
    """
    Convert a WGS84 (GPS) point to GCJ02.

    The raw polynomial offsets are scaled from meters into degrees using the
    Krasovsky ellipsoid's radii of curvature at the input latitude.

    Args:
        lng:
            WGS84 longitude

        lat:
            WGS84 latitude

    Returns:
        Coordinate in GCJ02
    """
    d_lat = _transform_lat(lng - 105.0, lat - 35.0)
    d_lng = _transform_lng(lng - 105.0, lat - 35.0)
    rad_lat = lat / 180.0 * PI
    magic = math.sin(rad_lat)
    magic = 1 - KRASOVSKY_EE * magic * magic
    sqrt_magic = math.sqrt(magic)
    d_lat = (d_lat * 180.0) / ((KRASOVSKY_A * (1 - KRASOVSKY_EE)) / (magic * sqrt_magic) * PI)
    d_lng = (d_lng * 180.0) / (KRASOVSKY_A / sqrt_magic * math.cos(rad_lat) * PI)
    return Coordinate(lng + d_lng, lat + d_lat)


def gcj02_to_wgs84(lng: float, lat: float) -> Coordinate:
    """
    Convert a GCJ02 point to WGS84.

    There is no closed-form inverse. The forward offset is evaluated at the
    GCJ02 point itself and subtracted, i.e. `2 * input - wgs84_to_gcj02(input)`.
    Error is on the order of a meter within China, which is the accepted
    convention for this coordinate family; do not iterate it to convergence.

    Args:
        lng:
            GCJ02 longitude

        lat:
            GCJ02 latitude

    Returns:
        Coordinate in WGS84
    """
    shifted = wgs84_to_gcj02(lng, lat)
    return Coordinate(lng * 2 - shifted.longitude, lat * 2 - shifted.latitude)


def gcj02_to_bd09(lng: float, lat: float) -> Coordinate:
    """
    Convert a GCJ02 point to BD09 via a small polar distortion plus a constant
    shift.

    Args:
        lng:
            GCJ02 longitude

        lat:
            GCJ02 latitude

    Returns:
        Coordinate in BD09
    """
    z = math.sqrt(lng * lng + lat * lat) + 0.00002 * math.sin(lat * X_PI)
    theta = math.atan2(lat, lng) + 0.000003 * math.cos(lng * X_PI)
    return Coordinate(
        z * math.cos(theta) + BD09_LNG_OFFSET,
        z * math.sin(theta) + BD09_LAT_OFFSET
    )


def bd09_to_gcj02(lng: float, lat: float) -> Coordinate:
    """
    Convert a BD09 point to GCJ02. Removes the constant shift first, then
    reverses the polar distortion.

    Args:
        lng:
            BD09 longitude

        lat:
            BD09 latitude

    Returns:
        Coordinate in GCJ02
    """
    x = lng - BD09_LNG_OFFSET
    y = lat - BD09_LAT_OFFSET
    z = math.sqrt(x * x + y * y) - 0.00002 * math.sin(y * X_PI)
    theta = math.atan2(y, x) - 0.000003 * math.cos(x * X_PI)
    return Coordinate(z * math.cos(theta), z * math.sin(theta))


def wgs84_to_bd09(lng: float, lat: float) -> Coordinate:
    """Convert a WGS84 (GPS) point to BD09, by way of GCJ02"""
    gcj02 = wgs84_to_gcj02(lng, lat)
    return gcj02_to_bd09(gcj02.longitude, gcj02.latitude)


def bd09_to_wgs84(lng: float, lat: float) -> Coordinate:
    """Convert a BD09 point to WGS84 (GPS), by way of GCJ02"""
    gcj02 = bd09_to_gcj02(lng, lat)
    return gcj02_to_wgs84(gcj02.longitude, gcj02.latitude)


# Aliases named after the coordinate system tags
gps84_to_gcj02 = wgs84_to_gcj02
gcj02_to_gps84 = gcj02_to_wgs84
gps84_to_bd09 = wgs84_to_bd09
bd09_to_gps84 = bd09_to_wgs84
