"""
numpy versions of the point conversions, operating on (N, 2) arrays of
[longitude, latitude] rows
"""

__all__ = [
    'as_lnglat_array', 'bd09_to_gcj02', 'bd09_to_wgs84', 'gcj02_to_bd09',
    'gcj02_to_wgs84', 'wgs84_to_bd09', 'wgs84_to_gcj02',
]

import numpy as np

from chinacoords._const import (
    BD09_LAT_OFFSET, BD09_LNG_OFFSET, KRASOVSKY_A, KRASOVSKY_EE, PI, X_PI
)


def as_lnglat_array(points) -> np.ndarray:
    """
    Coerce input to a float array of shape (N, 2).

    Raises:
        ValueError: if the input is not two columns wide
    """
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return arr.reshape(0, 2)

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f'Expected an array of shape (N, 2), got {arr.shape}')

    return arr


def _transform_lat(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    ret = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + 0.1 * x * y + 0.2 * np.sqrt(np.abs(x))
    ret += (20.0 * np.sin(6.0 * x * PI) + 20.0 * np.sin(2.0 * x * PI)) * 2.0 / 3.0
    ret += (20.0 * np.sin(y * PI) + 40.0 * np.sin(y / 3.0 * PI)) * 2.0 / 3.0
    ret += (160.0 * np.sin(y / 12.0 * PI) + 320 * np.sin(y * PI / 30.0)) * 2.0 / 3.0
    return ret


def _transform_lng(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    ret = 300.0 + x + 2.0 * y + 0.1 * x * x + 0.1 * x * y + 0.1 * np.sqrt(np.abs(x))
    ret += (20.0 * np.sin(6.0 * x * PI) + 20.0 * np.sin(2.0 * x * PI)) * 2.0 / 3.0
    ret += (20.0 * np.sin(x * PI) + 40.0 * np.sin(x / 3.0 * PI)) * 2.0 / 3.0
    ret += (150.0 * np.sin(x / 12.0 * PI) + 300.0 * np.sin(x / 30.0 * PI)) * 2.0 / 3.0
    return ret


def wgs84_to_gcj02(arr: np.ndarray) -> np.ndarray:
    """Convert rows of WGS84 [lng, lat] to GCJ02"""
    arr = as_lnglat_array(arr)
    lng, lat = arr[:, 0], arr[:, 1]
    d_lat = _transform_lat(lng - 105.0, lat - 35.0)
    d_lng = _transform_lng(lng - 105.0, lat - 35.0)
    rad_lat = lat / 180.0 * PI
    magic = np.sin(rad_lat)
    magic = 1 - KRASOVSKY_EE * magic * magic
    sqrt_magic = np.sqrt(magic)
    d_lat = (d_lat * 180.0) / ((KRASOVSKY_A * (1 - KRASOVSKY_EE)) / (magic * sqrt_magic) * PI)
    d_lng = (d_lng * 180.0) / (KRASOVSKY_A / sqrt_magic * np.cos(rad_lat) * PI)
    return np.column_stack((lng + d_lng, lat + d_lat))


def gcj02_to_wgs84(arr: np.ndarray) -> np.ndarray:
    """Convert rows of GCJ02 [lng, lat] to WGS84 (approximate inverse)"""
    arr = as_lnglat_array(arr)
    return arr * 2 - wgs84_to_gcj02(arr)


def gcj02_to_bd09(arr: np.ndarray) -> np.ndarray:
    """Convert rows of GCJ02 [lng, lat] to BD09"""
    arr = as_lnglat_array(arr)
    lng, lat = arr[:, 0], arr[:, 1]
    z = np.sqrt(lng * lng + lat * lat) + 0.00002 * np.sin(lat * X_PI)
    theta = np.arctan2(lat, lng) + 0.000003 * np.cos(lng * X_PI)
    return np.column_stack((
        z * np.cos(theta) + BD09_LNG_OFFSET,
        z * np.sin(theta) + BD09_LAT_OFFSET,
    ))


def bd09_to_gcj02(arr: np.ndarray) -> np.ndarray:
    """Convert rows of BD09 [lng, lat] to GCJ02"""
    arr = as_lnglat_array(arr)
    x = arr[:, 0] - BD09_LNG_OFFSET
    y = arr[:, 1] - BD09_LAT_OFFSET
    z = np.sqrt(x * x + y * y) - 0.00002 * np.sin(y * X_PI)
    theta = np.arctan2(y, x) - 0.000003 * np.cos(x * X_PI)
    return np.column_stack((z * np.cos(theta), z * np.sin(theta)))


def wgs84_to_bd09(arr: np.ndarray) -> np.ndarray:
    """Convert rows of WGS84 [lng, lat] to BD09"""
    return gcj02_to_bd09(wgs84_to_gcj02(arr))


def bd09_to_wgs84(arr: np.ndarray) -> np.ndarray:
    """Convert rows of BD09 [lng, lat] to WGS84"""
    return gcj02_to_wgs84(bd09_to_gcj02(arr))
