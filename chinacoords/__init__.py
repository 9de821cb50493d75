
from chinacoords._version import __version__  # noqa: F401
from chinacoords.utils.logging import LOGGER
from chinacoords.coordinates import Coordinate
from chinacoords.coord_types import CoordType
from chinacoords.exceptions import UnsupportedConversion
from chinacoords.transform import (
    bd09_to_gcj02, bd09_to_gps84, bd09_to_wgs84, gcj02_to_bd09, gcj02_to_gps84,
    gcj02_to_wgs84, gps84_to_bd09, gps84_to_gcj02, wgs84_to_bd09, wgs84_to_gcj02
)
from chinacoords.conversion import convert_array, get_converter
from chinacoords.converter import COORD_CONVERTER, CoordConverter, coord_convert


__all__ = [
    'COORD_CONVERTER',
    'Coordinate',
    'CoordConverter',
    'CoordType',
    'UnsupportedConversion',
    'bd09_to_gcj02',
    'bd09_to_gps84',
    'bd09_to_wgs84',
    'convert_array',
    'coord_convert',
    'gcj02_to_bd09',
    'gcj02_to_gps84',
    'gcj02_to_wgs84',
    'get_converter',
    'gps84_to_bd09',
    'gps84_to_gcj02',
    'wgs84_to_bd09',
    'wgs84_to_gcj02',
    'LOGGER',
]
