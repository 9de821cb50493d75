"""
Helpers for map tile layers whose tiles are drawn in a coordinate system other
than the map view's.

The map view is always WGS84. A layer declared as gcj02 or bd09 has its view
centre shifted into that system before any pixel math is done, so that its
tiles line up with WGS84 overlays.
"""

__all__ = ['PixelBounds', 'layer_center', 'project', 'tiled_pixel_bounds']

import math
from typing import NamedTuple, Optional, Tuple, Union

from chinacoords.conversion import convert_coordinate
from chinacoords.coord_types import CoordType
from chinacoords.coordinates import Coordinate
from chinacoords.utils.logging import warn_once

# Web Mercator is undefined at the poles
MAX_MERCATOR_LATITUDE = 85.0511287798


class PixelBounds(NamedTuple):
    """A rectangle in global pixel space"""
    min_x: float
    min_y: float
    max_x: float
    max_y: float


def layer_center(
    center: Coordinate,
    coord_type: Optional[Union[CoordType, str]] = None,
) -> Coordinate:
    """
    Shift a WGS84 view centre into the coordinate system a layer is drawn in.

    Args:
        center:
            The map view centre, in WGS84

        coord_type:
            The layer's coordinate system. None, gps84 or an unrecognized tag
            leave the centre as-is.

    Returns:
        Coordinate
    """
    if coord_type is None:
        return center

    if CoordType.parse(coord_type) is None:
        warn_once(f'Unrecognized layer coordinate system {coord_type!r}; tiles will not be shifted.')
        return center

    return convert_coordinate(center, CoordType.GPS84, coord_type)


def project(coord: Coordinate, zoom: float, tile_size: int = 256) -> Tuple[float, float]:
    """
    Project a coordinate into spherical Web Mercator global pixel space.

    Args:
        coord:
            The coordinate to project

        zoom:
            The zoom level; the world is tile_size * 2 ** zoom pixels wide

        tile_size: (Default 256)
            Width of a tile, in pixels

    Returns:
        (x, y) pixel position, with the origin at the top-left (180W, 85.05N)
    """
    scale = tile_size * 2 ** zoom
    lat = max(min(coord.latitude, MAX_MERCATOR_LATITUDE), -MAX_MERCATOR_LATITUDE)
    sin_lat = math.sin(math.radians(lat))
    x = (coord.longitude + 180.0) / 360.0 * scale
    y = (0.5 - math.log((1 + sin_lat) / (1 - sin_lat)) / (4 * math.pi)) * scale
    return x, y


def tiled_pixel_bounds(
    center: Coordinate,
    zoom: int,
    size: Tuple[float, float],
    coord_type: Optional[Union[CoordType, str]] = None,
    scale: float = 1.0,
    tile_size: int = 256,
) -> PixelBounds:
    """
    The pixel bounds a layer needs to cover to fill the map view.

    Args:
        center:
            The map view centre, in WGS84

        zoom:
            The layer's tile zoom level

        size:
            The (width, height) of the map view, in pixels

        coord_type:
            The layer's coordinate system

        scale: (Default 1.0)
            Ratio between the map's current zoom scale and the tile zoom scale,
            e.g. while a zoom animation is in progress

        tile_size: (Default 256)
            Width of a tile, in pixels

    Returns:
        PixelBounds
    """
    x, y = project(layer_center(center, coord_type), zoom, tile_size)
    x, y = math.floor(x), math.floor(y)
    half_w, half_h = size[0] / (scale * 2), size[1] / (scale * 2)
    return PixelBounds(x - half_w, y - half_h, x + half_w, y + half_h)
