"""
KEM Recipient
=============
Recovers the sender's symmetric key from a token and a static private key.

Each call:
    1. decodes the token into the ephemeral public point; the provider
       rejects anything off the recipient's curve
    2. shared_secret = ECDH(static private, ephemeral public)
    3. key = HKDF(hash, token || shared_secret, salt, info, key_size)

The recipient's public point is recomputed from the private scalar at
construction. Any x/y that arrived with the scalar is ignored, so a
corrupted public component cannot change the derived key.
"""

import asyncio
import functools
import logging

from ..curves import HashType, PointFormat
from ..errors import InvalidPointError, InvalidTokenError
from ..keys import EcPrivateKey, EcPublicKey, private_key_from_jwk
from ..point_codec import point_decode
from ..providers import (
    CurveProvider, KdfProvider, default_curve_provider, default_kdf_provider,
)
from ..validators import validate_bytes, validate_params, validate_private_key
from .derivation import compute_ecies_hkdf_symmetric_key

logger = logging.getLogger(__name__)


class EciesHkdfKemRecipient:
    """ECIES-HKDF KEM, recipient half."""

    DEFAULT_POINT_FORMAT = PointFormat.UNCOMPRESSED
    DEFAULT_HASH         = HashType.SHA256

    def __init__(self, recipient_private_key: EcPrivateKey,
                 curve_provider: CurveProvider = None,
                 kdf_provider: KdfProvider = None):
        self._private_key = validate_private_key(recipient_private_key)
        self._curves = curve_provider or default_curve_provider()
        self._kdf    = kdf_provider or default_kdf_provider()
        self._public_key = self._curves.public_key_from_private(self._private_key)
        logger.info("EciesHkdfKemRecipient | curve=%s", self._private_key.curve.value)

    @classmethod
    def new_instance(cls, recipient_private_key, **providers) -> "EciesHkdfKemRecipient":
        """Accepts an EcPrivateKey or a private JWK dict."""
        if isinstance(recipient_private_key, dict):
            recipient_private_key = private_key_from_jwk(recipient_private_key)
        return cls(recipient_private_key, **providers)

    @property
    def public_key(self) -> EcPublicKey:
        """Public key derived from the private scalar."""
        return self._public_key

    def _decode_token(self, token: bytes, point_format: PointFormat) -> EcPublicKey:
        curve = self._private_key.curve
        try:
            x, y = point_decode(curve, point_format, token, self._curves)
        except InvalidPointError:
            # Length, prefix and curve failures look the same to the caller.
            raise InvalidTokenError("invalid token") from None
        return EcPublicKey(curve, x, y)

    def decapsulate(self, token: bytes, key_size: int,
                    point_format=DEFAULT_POINT_FORMAT,
                    hash_type=DEFAULT_HASH,
                    info: bytes = b"",
                    salt: bytes = b"") -> bytes:
        key_size, point_format, hash_type, info, salt = validate_params(
            key_size, point_format, hash_type, info, salt)
        token = validate_bytes(token, "token")

        ephemeral_public_key = self._decode_token(token, point_format)
        shared_secret = self._curves.compute_shared_secret(
            self._private_key, ephemeral_public_key)

        key = compute_ecies_hkdf_symmetric_key(
            self._kdf, token, shared_secret, hash_type, salt, info, key_size)
        logger.debug("Decap: curve=%s hash=%s token=%dB key=%dB",
                     self._private_key.curve.value, hash_type.value,
                     len(token), len(key))
        return key

    async def decapsulate_async(self, token: bytes, key_size: int,
                                point_format=DEFAULT_POINT_FORMAT,
                                hash_type=DEFAULT_HASH,
                                info: bytes = b"",
                                salt: bytes = b"") -> bytes:
        """decapsulate() on the loop's default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(
            self.decapsulate, token, key_size, point_format, hash_type, info, salt))

    def __repr__(self):
        return f"EciesHkdfKemRecipient({self._private_key.curve.value})"
