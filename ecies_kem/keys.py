"""
Key structs and Key Codec
=========================
EcPublicKey and EcPrivateKey hold explicit coordinates and scalar for one
curve. External representations (JWK dicts, encoded points, raw scalars)
are parsed into these structs at the boundary, and missing or malformed
fields are rejected right there.

JWK layout (RFC 7518 section 6.2):
    {"kty": "EC", "crv": "P-256", "x": b64url, "y": b64url, "d": b64url}

The private scalar is never included in repr().
"""

import base64
import binascii
from dataclasses import dataclass, field
from typing import Optional

from .curves import (
    CurveType, PointFormat, curve_from_string, field_size_in_bytes,
)
from .errors import (
    InvalidPointError, KeyFormatError, KeyTypeError, UnsupportedParameterError,
)
from .point_codec import (
    bytes_to_int, int_to_bytes, is_on_curve, point_decode, point_encode,
)


@dataclass(frozen=True)
class EcPublicKey:
    """
    Public point. Curve membership is checked where keys enter: the JWK
    and bytes parsers below, and the sender's constructor.
    """
    curve: CurveType
    x: int
    y: int

    @property
    def point(self):
        return self.x, self.y

    def encode(self, point_format: PointFormat = PointFormat.UNCOMPRESSED,
               curve_provider=None) -> bytes:
        return point_encode(self.curve, point_format, self.point, curve_provider)


@dataclass(frozen=True)
class EcPrivateKey:
    """
    Static private key. `x`/`y` are whatever public component arrived with
    the scalar; they are informational only and never trusted by the KEM,
    which recomputes the public point from `d`.
    """
    curve: CurveType
    d: int = field(repr=False)
    x: Optional[int] = None
    y: Optional[int] = None

    def __post_init__(self):
        if self.d <= 0 or self.d.bit_length() > 8 * field_size_in_bytes(self.curve):
            raise KeyFormatError("private scalar out of range")


# -- base64url helpers --------------------------------------------------------

def _b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64url_decode(value, name: str) -> bytes:
    if not isinstance(value, str) or not value:
        raise KeyFormatError(f"missing or malformed JWK field: {name}")
    try:
        return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))
    except (binascii.Error, ValueError):
        raise KeyFormatError(f"missing or malformed JWK field: {name}") from None


def _coordinate(jwk: dict, name: str, curve: CurveType) -> int:
    raw = _b64url_decode(jwk.get(name), name)
    if len(raw) != field_size_in_bytes(curve):
        raise KeyFormatError(f"JWK field {name} has wrong length")
    return bytes_to_int(raw)


def _jwk_curve(jwk) -> CurveType:
    if not isinstance(jwk, dict):
        raise KeyFormatError("JWK must be a dict")
    if jwk.get("kty") != "EC":
        raise KeyFormatError("JWK kty must be EC")
    if "crv" not in jwk:
        raise KeyFormatError("missing or malformed JWK field: crv")
    try:
        return curve_from_string(jwk["crv"])
    except UnsupportedParameterError as exc:
        raise KeyFormatError(str(exc)) from exc


# -- JWK ----------------------------------------------------------------------

def public_key_from_jwk(jwk: dict) -> EcPublicKey:
    curve = _jwk_curve(jwk)
    if "d" in jwk:
        raise KeyTypeError("expected public key")
    x = _coordinate(jwk, "x", curve)
    y = _coordinate(jwk, "y", curve)
    if not is_on_curve(curve, x, y):
        raise InvalidPointError("invalid point")
    return EcPublicKey(curve, x, y)


def private_key_from_jwk(jwk: dict) -> EcPrivateKey:
    curve = _jwk_curve(jwk)
    if "d" not in jwk:
        raise KeyTypeError("expected private key")
    d = _b64url_decode(jwk["d"], "d")
    if len(d) != field_size_in_bytes(curve):
        raise KeyFormatError("JWK field d has wrong length")
    # x/y are kept as given. They are not checked against d.
    x = _coordinate(jwk, "x", curve) if "x" in jwk else None
    y = _coordinate(jwk, "y", curve) if "y" in jwk else None
    return EcPrivateKey(curve, bytes_to_int(d), x, y)


def public_key_to_jwk(key: EcPublicKey) -> dict:
    n = field_size_in_bytes(key.curve)
    return {
        "kty": "EC",
        "crv": key.curve.value,
        "x":   _b64url_encode(int_to_bytes(key.x, n)),
        "y":   _b64url_encode(int_to_bytes(key.y, n)),
    }


def private_key_to_jwk(key: EcPrivateKey) -> dict:
    n = field_size_in_bytes(key.curve)
    jwk = {"kty": "EC", "crv": key.curve.value}
    if key.x is not None and key.y is not None:
        jwk["x"] = _b64url_encode(int_to_bytes(key.x, n))
        jwk["y"] = _b64url_encode(int_to_bytes(key.y, n))
    jwk["d"] = _b64url_encode(int_to_bytes(key.d, n))
    return jwk


# -- Raw bytes ----------------------------------------------------------------

def public_key_from_bytes(curve: CurveType, point_format: PointFormat,
                          data: bytes) -> EcPublicKey:
    x, y = point_decode(curve, point_format, data)
    return EcPublicKey(curve, x, y)


def private_key_from_bytes(curve: CurveType, scalar: bytes,
                           public_point: Optional[bytes] = None,
                           point_format: PointFormat = PointFormat.UNCOMPRESSED
                           ) -> EcPrivateKey:
    """
    Scalar is big-endian, field-size bytes. `public_point`, if given, is
    decoded and stored alongside the scalar.
    """
    if len(scalar) != field_size_in_bytes(curve):
        raise KeyFormatError("private scalar has wrong length")
    x = y = None
    if public_point is not None:
        x, y = point_decode(curve, point_format, public_point)
    return EcPrivateKey(curve, bytes_to_int(scalar), x, y)
