"""
ecies_kem — validation layer tests
==================================
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fractions import Fraction

import pytest
from ecies_kem import (
    HashType, PointFormat, SizeError, KeyTypeError, UnsupportedParameterError,
    ParameterTypeError, InvalidPointError, EcPublicKey,
    public_key_from_bytes, private_key_from_bytes, CurveType,
)
from ecies_kem.validators import (
    validate_key_size, validate_params, validate_public_key,
    validate_private_key, validate_bytes,
)
from kem_vectors import TEST_VECTORS

# ── Key size ──────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("bad", [1.8, float("nan"), 16.0, "16", None, True,
                                 Fraction(3, 1)])
def test_non_integer_size(bad):
    with pytest.raises(SizeError, match="^size must be an integer$"):
        validate_key_size(bad, HashType.SHA256)

@pytest.mark.parametrize("bad", [0, -1, -32])
def test_non_positive_size(bad):
    with pytest.raises(SizeError, match="^size must be positive$"):
        validate_key_size(bad, HashType.SHA256)

@pytest.mark.parametrize("hash_type,limit", [
    (HashType.SHA1, 255 * 20), (HashType.SHA256, 255 * 32),
    (HashType.SHA512, 255 * 64),
])
def test_size_limit_per_hash(hash_type, limit):
    assert validate_key_size(limit, hash_type) == limit
    with pytest.raises(SizeError, match="^size too large$"):
        validate_key_size(limit + 1, hash_type)

def test_size_error_is_value_error():
    with pytest.raises(ValueError):
        validate_key_size(2.5, HashType.SHA256)

# ── Parameters ────────────────────────────────────────────────────────────────
def test_params_accept_strings_and_enums():
    assert validate_params(16, "UNCOMPRESSED", "SHA-256", b"i", bytearray(b"s")) == (
        16, PointFormat.UNCOMPRESSED, HashType.SHA256, b"i", b"s")
    assert validate_params(8, PointFormat.COMPRESSED, HashType.SHA1, None, None) == (
        8, PointFormat.COMPRESSED, HashType.SHA1, b"", b"")

def test_params_reject_unknown_names():
    with pytest.raises(UnsupportedParameterError):
        validate_params(16, "HYBRID", "SHA-256", b"", b"")
    with pytest.raises(UnsupportedParameterError):
        validate_params(16, "UNCOMPRESSED", "MD5", b"", b"")

def test_params_reject_text_info():
    with pytest.raises(ParameterTypeError, match="^info must be bytes$"):
        validate_bytes("info", "info")
    with pytest.raises(ParameterTypeError):
        validate_params(16, "UNCOMPRESSED", "SHA-256", b"", "salt")

def test_parameter_type_error_is_type_error():
    with pytest.raises(TypeError):
        validate_bytes(16, "salt")

@pytest.mark.parametrize("bad", [1.8, float("nan"), "16"])
def test_size_type_checked_before_hash_name(bad):
    with pytest.raises(SizeError, match="^size must be an integer$"):
        validate_params(bad, "UNCOMPRESSED", "MD5", b"", b"")

# ── Key roles ─────────────────────────────────────────────────────────────────
def test_key_roles():
    vector = TEST_VECTORS[0]
    pub  = public_key_from_bytes(CurveType.P256, PointFormat.UNCOMPRESSED,
                                 bytes.fromhex(vector.token))
    priv = private_key_from_bytes(CurveType.P256,
                                  bytes.fromhex(vector.private_key_value))
    assert validate_public_key(pub) is pub
    assert validate_private_key(priv) is priv
    with pytest.raises(KeyTypeError, match="expected public key"):
        validate_public_key(priv)
    with pytest.raises(KeyTypeError, match="expected private key"):
        validate_private_key(pub)
    with pytest.raises(KeyTypeError):
        validate_private_key(b"\x01" * 32)
    with pytest.raises(InvalidPointError):
        validate_public_key(EcPublicKey(CurveType.P256, 1, 2))
