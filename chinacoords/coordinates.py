"""
Representation of a specific point in one of the supported coordinate systems
"""

__all__ = ['Coordinate']

from typing import Iterator, Optional, Tuple, Union

from chinacoords.utils.functions import round_half_up


class Coordinate:
    """
    A lon/lat pair in decimal degrees.

    Unlike a WGS84 position, a Coordinate here may be expressed in any of the
    three systems (the system is not stored on the object), so values are
    neither validated nor wrapped around the poles or antimeridian.
    """

    __slots__ = ('_longitude', '_latitude', '_z', '_m')

    def __init__(
        self,
        longitude: Union[float, int, str],
        latitude: Union[float, int, str],
        z: Optional[float] = None,
        m: Optional[float] = None,
    ):
        self._longitude = float(longitude)
        self._latitude = float(latitude)
        self._z = z
        self._m = m

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.z == other.z and
            self.m == other.m
        )

    def __hash__(self):
        return hash((self.longitude, self.latitude, self.z, self.m))

    def __iter__(self) -> Iterator[float]:
        yield self.longitude
        yield self.latitude

    def __repr__(self):
        parts = filter(lambda x: x is not None, (self.longitude, self.latitude, self.z, self.m))
        return f'<Coordinate({", ".join(map(str, parts))})>'

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def lng(self) -> float:
        """Alias of longitude"""
        return self._longitude

    @property
    def lat(self) -> float:
        """Alias of latitude"""
        return self._latitude

    @property
    def z(self) -> Optional[float]:
        return self._z

    @property
    def m(self) -> Optional[float]:
        return self._m

    @classmethod
    def from_dms(cls, lon: Tuple[int, int, float, str], lat: Tuple[int, int, float, str]):
        """
        Creates a Coordinate from a Degree Minutes Seconds (lon, lat) pair.

        The quadrant value should consist of either 'E'/'W' (longitude) or 'N'/'S' (latitude)

        Args:
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )

        Returns:
            Coordinate
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return Coordinate(convert(lon), convert(lat))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert this coordinate to a pair of (degrees, minutes, seconds, hemisphere)
        tuples, longitude first.

        Returns:
            converted value as ((lon dms), (lat dms))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
        )

    def to_float(self, reverse: bool = False) -> Tuple:
        """
        Converts the coordinate to a tuple of floats (longitude, latitude).
        If the Coordinate contains Z and/or M datapoints, the tuple will be extended
        to include both (in that order)

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple of up to length 4, consisting of (longitude, latitude, altitude, M)
        """
        out = [self.longitude, self.latitude]
        if reverse:
            out = out[::-1]

        if self.z is not None:
            out.append(self.z)
        if self.m is not None:
            out.append(self.m)
        return tuple(out)

    def to_str(self, reverse: bool = False) -> Tuple:
        """
        Converts the coordinate to a tuple of strings (longitude, latitude).
        If the Coordinate contains Z and/or M datapoints, the tuple will be extended
        to include both (in that order)

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple of up to length 4, consisting of (longitude, latitude, altitude, M)
        """
        return tuple(map(str, self.to_float(reverse)))

    def with_lnglat(self, lng: float, lat: float) -> 'Coordinate':
        """Copy of this coordinate at a new lon/lat, keeping Z and M"""
        return Coordinate(lng, lat, z=self.z, m=self.m)
