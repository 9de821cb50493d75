"""
The coordinate systems that chinacoords converts between
"""

__all__ = ['CoordType']

from enum import Enum
from typing import Any, Optional


class CoordType(str, Enum):
    """
    Tag for one of the three supported coordinate systems.

    GPS84:
        Raw GPS coordinates (WGS84)
    GCJ02:
        The obfuscated "Mars" coordinates used by most Chinese map providers
    BD09:
        Baidu's additional offset applied on top of GCJ02
    """
    GPS84 = 'gps84'
    GCJ02 = 'gcj02'
    BD09 = 'bd09'

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, value: Any) -> Optional['CoordType']:
        """
        Resolve a CoordType from a member or its exact string value.

        Args:
            value:
                A CoordType or one of 'gps84', 'gcj02', 'bd09'

        Returns:
            The matching CoordType, or None if the value names no known system
        """
        if isinstance(value, cls):
            return value

        if not isinstance(value, str):
            return None

        try:
            return cls(value)
        except ValueError:
            return None
