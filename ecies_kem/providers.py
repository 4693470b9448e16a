"""
Providers
=========
The KEM core never touches curve arithmetic or HMAC directly. It talks to
three small interfaces:

    CurveProvider   key generation, ECDH, curve membership, X9.62 points
    KdfProvider     RFC 5869 HKDF
    RandomSource    random bytes for salts and tests

The defaults are backed by the `cryptography` package (OpenSSL), and any
compliant backend can be swapped in through the Sender/Recipient
constructors. Input rejected by a backend surfaces as ProviderError,
except point bytes that name no curve point, which raise InvalidPointError.

Dependencies: cryptography >= 41.0
"""

import abc
import logging
import os
from dataclasses import dataclass
from typing import Tuple

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from .curves import CurveType, HashType, field_size_in_bytes
from .errors import InvalidPointError, ProviderError, UnsupportedParameterError
from .keys import EcPrivateKey, EcPublicKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyPair:
    private_key: EcPrivateKey
    public_key:  EcPublicKey


# -- Interfaces ---------------------------------------------------------------

class CurveProvider(abc.ABC):

    @abc.abstractmethod
    def generate_key_pair(self, curve: CurveType) -> KeyPair:
        """Fresh random key pair on `curve`."""

    @abc.abstractmethod
    def compute_shared_secret(self, private_key: EcPrivateKey,
                              public_key: EcPublicKey) -> bytes:
        """ECDH: the X coordinate of d*Q, field-size bytes."""

    @abc.abstractmethod
    def is_on_curve(self, curve: CurveType, x: int, y: int) -> bool:
        ...

    @abc.abstractmethod
    def public_key_from_private(self, private_key: EcPrivateKey) -> EcPublicKey:
        """Recompute Q = d*G from the scalar alone."""

    @abc.abstractmethod
    def encode_point(self, curve: CurveType, x: int, y: int,
                     compressed: bool = False) -> bytes:
        """X9.62 encoding, 0x04 or 0x02/0x03 prefixed."""

    @abc.abstractmethod
    def decode_point(self, curve: CurveType, data: bytes) -> Tuple[int, int]:
        """
        Parse an X9.62 encoding. Raises InvalidPointError if the bytes do
        not name a point on `curve`.
        """

    def field_size_in_bytes(self, curve: CurveType) -> int:
        return field_size_in_bytes(curve)


class KdfProvider(abc.ABC):

    @abc.abstractmethod
    def hkdf(self, hash_type: HashType, ikm: bytes, salt: bytes,
             info: bytes, length: int) -> bytes:
        ...


class RandomSource(abc.ABC):

    @abc.abstractmethod
    def random_bytes(self, n: int) -> bytes:
        ...


# -- cryptography-backed defaults ---------------------------------------------

_CURVES = {
    CurveType.P256: ec.SECP256R1,
    CurveType.P384: ec.SECP384R1,
    CurveType.P521: ec.SECP521R1,
}

_HASHES = {
    HashType.SHA1:   hashes.SHA1,
    HashType.SHA256: hashes.SHA256,
    HashType.SHA384: hashes.SHA384,
    HashType.SHA512: hashes.SHA512,
}


def _native_curve(curve: CurveType) -> ec.EllipticCurve:
    try:
        return _CURVES[curve]()
    except KeyError:
        raise UnsupportedParameterError(f"unknown curve: {curve!r}") from None


class CryptographyCurveProvider(CurveProvider):
    """NIST curves through cryptography's OpenSSL bindings."""

    def _private(self, key: EcPrivateKey) -> ec.EllipticCurvePrivateKey:
        try:
            return ec.derive_private_key(key.d, _native_curve(key.curve))
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise ProviderError("provider rejected private key") from exc

    def _public(self, key: EcPublicKey) -> ec.EllipticCurvePublicKey:
        try:
            return ec.EllipticCurvePublicNumbers(
                key.x, key.y, _native_curve(key.curve)
            ).public_key()
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise ProviderError("provider rejected public key") from exc

    @staticmethod
    def _to_public(curve: CurveType, native: ec.EllipticCurvePublicKey) -> EcPublicKey:
        numbers = native.public_numbers()
        return EcPublicKey(curve, numbers.x, numbers.y)

    def generate_key_pair(self, curve: CurveType) -> KeyPair:
        native = ec.generate_private_key(_native_curve(curve))
        logger.debug("generated key pair on %s", curve.value)
        pub    = self._to_public(curve, native.public_key())
        priv   = EcPrivateKey(curve, native.private_numbers().private_value,
                              pub.x, pub.y)
        return KeyPair(private_key=priv, public_key=pub)

    def compute_shared_secret(self, private_key: EcPrivateKey,
                              public_key: EcPublicKey) -> bytes:
        if private_key.curve is not public_key.curve:
            raise ProviderError("curve mismatch")
        try:
            return self._private(private_key).exchange(
                ec.ECDH(), self._public(public_key))
        except ValueError as exc:
            raise ProviderError("ECDH failed") from exc

    def is_on_curve(self, curve: CurveType, x: int, y: int) -> bool:
        try:
            ec.EllipticCurvePublicNumbers(x, y, _native_curve(curve)).public_key()
        except ValueError:
            return False
        return True

    def public_key_from_private(self, private_key: EcPrivateKey) -> EcPublicKey:
        return self._to_public(private_key.curve,
                               self._private(private_key).public_key())

    def encode_point(self, curve: CurveType, x: int, y: int,
                     compressed: bool = False) -> bytes:
        try:
            native = ec.EllipticCurvePublicNumbers(x, y, _native_curve(curve)).public_key()
        except ValueError:
            raise InvalidPointError("invalid point") from None
        point_format = (serialization.PublicFormat.CompressedPoint if compressed
                        else serialization.PublicFormat.UncompressedPoint)
        return native.public_bytes(serialization.Encoding.X962, point_format)

    def decode_point(self, curve: CurveType, data: bytes) -> Tuple[int, int]:
        try:
            native = ec.EllipticCurvePublicKey.from_encoded_point(
                _native_curve(curve), data)
        except ValueError:
            raise InvalidPointError("invalid point") from None
        numbers = native.public_numbers()
        return numbers.x, numbers.y


class CryptographyKdfProvider(KdfProvider):
    """HKDF-Extract + HKDF-Expand (RFC 5869)."""

    def hkdf(self, hash_type: HashType, ikm: bytes, salt: bytes,
             info: bytes, length: int) -> bytes:
        try:
            algorithm = _HASHES[hash_type]()
        except KeyError:
            raise UnsupportedParameterError(f"unknown hash: {hash_type!r}") from None
        try:
            # An empty salt is equivalent to HashLen zero bytes.
            return HKDF(
                algorithm=algorithm,
                length=length,
                salt=salt or None,
                info=info,
            ).derive(ikm)
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise ProviderError("HKDF failed") from exc


class OsRandomSource(RandomSource):

    def random_bytes(self, n: int) -> bytes:
        return os.urandom(n)


_default_curve_provider = CryptographyCurveProvider()
_default_kdf_provider   = CryptographyKdfProvider()
_default_random_source  = OsRandomSource()


def default_curve_provider() -> CurveProvider:
    return _default_curve_provider


def default_kdf_provider() -> KdfProvider:
    return _default_kdf_provider


def random_bytes(n: int) -> bytes:
    return _default_random_source.random_bytes(n)
