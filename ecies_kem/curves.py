"""
Curves, point formats and hash types
====================================
Parameters shared by the point codec, the key structs and the KEM.

Supported curves are the NIST prime curves P-256, P-384 and P-521. The
curve arithmetic itself lives behind the CurveProvider.
"""

import enum

from .errors import UnsupportedParameterError


class CurveType(enum.Enum):
    P256 = "P-256"
    P384 = "P-384"
    P521 = "P-521"


class PointFormat(enum.Enum):
    UNCOMPRESSED = "UNCOMPRESSED"
    COMPRESSED   = "COMPRESSED"
    # X || Y without the 0x04 prefix. Kept for legacy peers only.
    DO_NOT_USE_CRUNCHY_UNCOMPRESSED = "DO_NOT_USE_CRUNCHY_UNCOMPRESSED"


class HashType(enum.Enum):
    SHA1   = "SHA-1"
    SHA256 = "SHA-256"
    SHA384 = "SHA-384"
    SHA512 = "SHA-512"


# Digest sizes in bytes, used for the HKDF output limit.
DIGEST_SIZES = {
    HashType.SHA1:   20,
    HashType.SHA256: 32,
    HashType.SHA384: 48,
    HashType.SHA512: 64,
}


# Byte width of one coordinate.
_FIELD_SIZES = {
    CurveType.P256: 32,
    CurveType.P384: 48,
    CurveType.P521: 66,
}


def field_size_in_bytes(curve: CurveType) -> int:
    try:
        return _FIELD_SIZES[curve]
    except KeyError:
        raise UnsupportedParameterError(f"unknown curve: {curve!r}") from None


def encoding_size_in_bytes(curve: CurveType, point_format: PointFormat) -> int:
    """Length of an encoded point for the given curve and format."""
    return size_for_field(field_size_in_bytes(curve), point_format)


def size_for_field(n: int, point_format: PointFormat) -> int:
    if point_format is PointFormat.UNCOMPRESSED:
        return 2 * n + 1
    if point_format is PointFormat.COMPRESSED:
        return n + 1
    if point_format is PointFormat.DO_NOT_USE_CRUNCHY_UNCOMPRESSED:
        return 2 * n
    raise UnsupportedParameterError(f"unknown point format: {point_format!r}")


def _coerce(enum_cls, value, what: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        pass
    if isinstance(value, str):
        # Accept member names as well: "P256", "SHA256", "compressed".
        member = enum_cls.__members__.get(value.upper().replace("-", ""))
        if member is not None:
            return member
    raise UnsupportedParameterError(f"unknown {what}: {value!r}")


def curve_from_string(value) -> CurveType:
    return _coerce(CurveType, value, "curve")


def curve_to_string(curve: CurveType) -> str:
    return curve_from_string(curve).value


def hash_from_string(value) -> HashType:
    return _coerce(HashType, value, "hash")


def point_format_from_string(value) -> PointFormat:
    return _coerce(PointFormat, value, "point format")
