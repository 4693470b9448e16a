"""
Validators
==========
Checks shared by the sender and the recipient. They run before any
provider call, and each raises an error with a stable message.
"""

import numbers

from .curves import (
    DIGEST_SIZES, HashType, hash_from_string, point_format_from_string,
)
from .errors import (
    InvalidPointError, KeyTypeError, ParameterTypeError, SizeError,
)
from .keys import EcPrivateKey, EcPublicKey
from .point_codec import is_on_curve


def _require_integer_size(size) -> int:
    # bool is an int subclass; True is not a key size.
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise SizeError("size must be an integer")
    return int(size)


def validate_key_size(size, hash_type: HashType) -> int:
    size = _require_integer_size(size)
    if size <= 0:
        raise SizeError("size must be positive")
    if size > 255 * DIGEST_SIZES[hash_type]:
        raise SizeError("size too large")
    return size


def validate_bytes(value, name: str) -> bytes:
    if value is None:
        return b""
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise ParameterTypeError(f"{name} must be bytes")
    return bytes(value)


def validate_public_key(key, curve_provider=None) -> EcPublicKey:
    if not isinstance(key, EcPublicKey):
        raise KeyTypeError("expected public key")
    if not is_on_curve(key.curve, key.x, key.y, curve_provider):
        raise InvalidPointError("invalid point")
    return key


def validate_private_key(key) -> EcPrivateKey:
    if not isinstance(key, EcPrivateKey):
        raise KeyTypeError("expected private key")
    return key


def validate_params(key_size, point_format, hash_type, info, salt):
    """
    Normalise the per-call derivation parameters.
    Returns (key_size, point_format, hash_type, info, salt).

    The size type is checked first, so a non-integer size is reported as
    such even when the hash name is also bad.
    """
    _require_integer_size(key_size)
    point_format = point_format_from_string(point_format)
    hash_type    = hash_from_string(hash_type)
    key_size     = validate_key_size(key_size, hash_type)
    info         = validate_bytes(info, "info")
    salt         = validate_bytes(salt, "salt")
    return key_size, point_format, hash_type, info, salt
