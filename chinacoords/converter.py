"""
Object interface to the coordinate conversions, for callers (such as map
layers) that hold on to a converter rather than importing functions
"""

__all__ = ['COORD_CONVERTER', 'CoordConverter', 'coord_convert']

from typing import Iterable, Union

from chinacoords import _const, transform
from chinacoords.conversion import convert_array
from chinacoords.coord_types import CoordType
from chinacoords.coordinates import Coordinate
from chinacoords.utils.mixins import LoggingMixin


class CoordConverter(LoggingMixin):
    """
    Converts points between gps84 (WGS84), gcj02 and bd09.

    Holds no state beyond the read-only constants below, so a single instance
    may be shared freely; see COORD_CONVERTER.
    """

    pi = _const.PI
    a = _const.KRASOVSKY_A
    ee = _const.KRASOVSKY_EE
    x_pi = _const.X_PI
    R = _const.EARTH_RADIUS_METERS

    def __repr__(self):
        return '<CoordConverter>'

    @staticmethod
    def gps84_to_gcj02(lng: float, lat: float) -> Coordinate:
        return transform.wgs84_to_gcj02(lng, lat)

    @staticmethod
    def gcj02_to_gps84(lng: float, lat: float) -> Coordinate:
        return transform.gcj02_to_wgs84(lng, lat)

    @staticmethod
    def gcj02_to_bd09(lng: float, lat: float) -> Coordinate:
        return transform.gcj02_to_bd09(lng, lat)

    @staticmethod
    def bd09_to_gcj02(lng: float, lat: float) -> Coordinate:
        return transform.bd09_to_gcj02(lng, lat)

    @staticmethod
    def gps84_to_bd09(lng: float, lat: float) -> Coordinate:
        return transform.wgs84_to_bd09(lng, lat)

    @staticmethod
    def bd09_to_gps84(lng: float, lat: float) -> Coordinate:
        return transform.bd09_to_wgs84(lng, lat)

    # Names used by the module-level functions
    wgs84_to_gcj02 = gps84_to_gcj02
    gcj02_to_wgs84 = gcj02_to_gps84
    wgs84_to_bd09 = gps84_to_bd09
    bd09_to_wgs84 = bd09_to_gps84

    def convert_array(
        self,
        points: Iterable,
        from_type: Union[CoordType, str],
        to_type: Union[CoordType, str],
    ):
        """
        Convert a batch of points; see chinacoords.conversion.convert_array
        """
        self.logger.debug('convert_array %s -> %s', from_type, to_type)
        return convert_array(points, from_type, to_type)


COORD_CONVERTER = CoordConverter()


def coord_convert() -> CoordConverter:
    """Returns the shared CoordConverter instance"""
    return COORD_CONVERTER
