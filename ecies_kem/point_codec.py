"""
EC Point Codec
==============
Fixed byte layouts for public points on the NIST prime curves.

    UNCOMPRESSED                      0x04 || X || Y        (1 + 2n bytes)
    COMPRESSED                        0x02/0x03 || X        (1 + n bytes)
    DO_NOT_USE_CRUNCHY_UNCOMPRESSED   X || Y                (2n bytes)

n is the field size in bytes (32, 48 or 66). Coordinates are big-endian
and left-padded with zeros to exactly n bytes, so P-521's 66-byte field
survives without loss of precision.

This module owns the layouts, lengths and prefix bytes. The X9.62
conversion and the curve-membership check are done by the CurveProvider,
so a well-formed but off-curve point raises InvalidPointError from there.
"""

import logging
from typing import Tuple

from .curves import CurveType, PointFormat, size_for_field
from .errors import InvalidPointError, UnsupportedParameterError

logger = logging.getLogger(__name__)

Point = Tuple[int, int]

_UNCOMPRESSED_PREFIX = 0x04
_COMPRESSED_PREFIXES = (0x02, 0x03)


def _provider(curve_provider):
    if curve_provider is None:
        # providers imports the key structs, which import this module.
        from .providers import default_curve_provider
        curve_provider = default_curve_provider()
    return curve_provider


# -- Integer <-> fixed-width bytes --------------------------------------------

def int_to_bytes(value: int, size: int) -> bytes:
    """Big-endian, zero-padded to exactly `size` bytes."""
    if value < 0:
        raise InvalidPointError("invalid point")
    try:
        return value.to_bytes(size, "big")
    except OverflowError:
        raise InvalidPointError("invalid point") from None


def bytes_to_int(data: bytes) -> int:
    return int.from_bytes(data, "big")


# -- Public API ---------------------------------------------------------------

def is_on_curve(curve: CurveType, x: int, y: int, curve_provider=None) -> bool:
    return _provider(curve_provider).is_on_curve(curve, x, y)


def point_encode(curve: CurveType, point_format: PointFormat, point: Point,
                 curve_provider=None) -> bytes:
    """Encode (x, y) with the given point format."""
    provider = _provider(curve_provider)
    x, y = point
    if point_format is PointFormat.UNCOMPRESSED:
        return provider.encode_point(curve, x, y, compressed=False)
    if point_format is PointFormat.COMPRESSED:
        return provider.encode_point(curve, x, y, compressed=True)
    if point_format is PointFormat.DO_NOT_USE_CRUNCHY_UNCOMPRESSED:
        return provider.encode_point(curve, x, y, compressed=False)[1:]
    raise UnsupportedParameterError(f"unknown point format: {point_format!r}")


def point_decode(curve: CurveType, point_format: PointFormat, data: bytes,
                 curve_provider=None) -> Point:
    """
    Decode bytes into (x, y).
    Raises InvalidPointError on a length mismatch, a bad prefix byte,
    or a point the provider finds off the curve.
    """
    provider = _provider(curve_provider)
    data = bytes(data)
    n = provider.field_size_in_bytes(curve)
    if len(data) != size_for_field(n, point_format):
        logger.debug("point decode: bad length %d for %s/%s",
                     len(data), curve.value, point_format.value)
        raise InvalidPointError("invalid point")

    if point_format is PointFormat.UNCOMPRESSED:
        if data[0] != _UNCOMPRESSED_PREFIX:
            raise InvalidPointError("invalid point")
    elif point_format is PointFormat.COMPRESSED:
        if data[0] not in _COMPRESSED_PREFIXES:
            raise InvalidPointError("invalid point")
    else:
        data = bytes([_UNCOMPRESSED_PREFIX]) + data

    return provider.decode_point(curve, data)
