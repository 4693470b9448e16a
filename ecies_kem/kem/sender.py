"""
KEM Sender
==========
Derives a fresh symmetric key bound to a recipient's static public key.

Each call:
    1. generates an ephemeral key pair on the recipient's curve
    2. shared_secret = ECDH(ephemeral private, recipient public)
    3. token = encode(ephemeral public, point_format)
    4. key = HKDF(hash, token || shared_secret, salt, info, key_size)

Only the token is sent to the recipient. The ephemeral private key and
the shared secret do not outlive the call.
"""

import asyncio
import functools
import logging
from dataclasses import dataclass, field

from ..curves import HashType, PointFormat
from ..keys import EcPublicKey, public_key_from_jwk
from ..providers import (
    CurveProvider, KdfProvider, default_curve_provider, default_kdf_provider,
)
from ..validators import validate_params, validate_public_key
from .derivation import compute_ecies_hkdf_symmetric_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KemKey:
    """Output of encapsulate(): the public token and the secret key."""
    token: bytes
    key:   bytes = field(repr=False)


class EciesHkdfKemSender:
    """ECIES-HKDF KEM, sender half."""

    DEFAULT_POINT_FORMAT = PointFormat.UNCOMPRESSED
    DEFAULT_HASH         = HashType.SHA256

    def __init__(self, recipient_public_key: EcPublicKey,
                 curve_provider: CurveProvider = None,
                 kdf_provider: KdfProvider = None):
        self._curves = curve_provider or default_curve_provider()
        self._recipient_public_key = validate_public_key(
            recipient_public_key, self._curves)
        self._kdf    = kdf_provider or default_kdf_provider()
        logger.info("EciesHkdfKemSender | curve=%s",
                    self._recipient_public_key.curve.value)

    @classmethod
    def new_instance(cls, recipient_public_key, **providers) -> "EciesHkdfKemSender":
        """Accepts an EcPublicKey or a public JWK dict."""
        if isinstance(recipient_public_key, dict):
            recipient_public_key = public_key_from_jwk(recipient_public_key)
        return cls(recipient_public_key, **providers)

    @property
    def recipient_public_key(self) -> EcPublicKey:
        return self._recipient_public_key

    def encapsulate(self, key_size: int,
                    point_format=DEFAULT_POINT_FORMAT,
                    hash_type=DEFAULT_HASH,
                    info: bytes = b"",
                    salt: bytes = b"") -> KemKey:
        key_size, point_format, hash_type, info, salt = validate_params(
            key_size, point_format, hash_type, info, salt)

        curve     = self._recipient_public_key.curve
        ephemeral = self._curves.generate_key_pair(curve)
        shared_secret = self._curves.compute_shared_secret(
            ephemeral.private_key, self._recipient_public_key)
        token = ephemeral.public_key.encode(point_format, self._curves)
        del ephemeral

        key = compute_ecies_hkdf_symmetric_key(
            self._kdf, token, shared_secret, hash_type, salt, info, key_size)
        logger.debug("Encap: curve=%s hash=%s token=%dB key=%dB",
                     curve.value, hash_type.value, len(token), len(key))
        return KemKey(token=token, key=key)

    async def encapsulate_async(self, key_size: int,
                                point_format=DEFAULT_POINT_FORMAT,
                                hash_type=DEFAULT_HASH,
                                info: bytes = b"",
                                salt: bytes = b"") -> KemKey:
        """encapsulate() on the loop's default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(
            self.encapsulate, key_size, point_format, hash_type, info, salt))

    def __repr__(self):
        return f"EciesHkdfKemSender({self._recipient_public_key.curve.value})"
