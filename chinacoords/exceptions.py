"""
Errors raised by chinacoords
"""

__all__ = ['UnsupportedConversion']

from typing import Any


class UnsupportedConversion(ValueError):
    """
    Raised when a (from, to) pair of coordinate system tags does not name one of
    the known conversions.

    Attributes:
        from_type:
            The source tag, exactly as supplied by the caller

        to_type:
            The destination tag, exactly as supplied by the caller
    """

    def __init__(self, from_type: Any, to_type: Any):
        self.from_type = from_type
        self.to_type = to_type
        super().__init__(
            f'Unsupported conversion: {_tag_str(from_type)} -> {_tag_str(to_type)}'
        )


def _tag_str(tag: Any) -> str:
    # CoordType members render as their bare value
    return str(getattr(tag, 'value', tag))
