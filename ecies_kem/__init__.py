"""
ecies_kem — ECIES-HKDF Key Encapsulation
========================================
Ephemeral-static ECDH on the NIST prime curves, with the shared secret
fed through HKDF to produce a symmetric key of any requested length.

    sender    = EciesHkdfKemSender.new_instance(recipient_public_key)
    kem_key   = sender.encapsulate(32, "UNCOMPRESSED", "SHA-256", info, salt)
    # send kem_key.token to the recipient
    recipient = EciesHkdfKemRecipient.new_instance(recipient_private_key)
    key       = recipient.decapsulate(kem_key.token, 32, "UNCOMPRESSED",
                                      "SHA-256", info, salt)

Modules:
    curves       CurveType, PointFormat, HashType and curve constants
    point_codec  point encode / decode
    keys         EcPublicKey, EcPrivateKey and the JWK key codec
    validators   parameter checks shared by both halves
    providers    curve, KDF and randomness backends (cryptography)
    kem          EciesHkdfKemSender, EciesHkdfKemRecipient

License: Apache 2.0
"""

__version__ = "1.0.0"

from .curves      import (CurveType, PointFormat, HashType, curve_from_string,
                          curve_to_string, hash_from_string,
                          field_size_in_bytes, encoding_size_in_bytes)
from .errors      import (EciesError, SizeError, KeyTypeError, KeyFormatError,
                          InvalidPointError, InvalidTokenError,
                          UnsupportedParameterError, ProviderError,
                          ParameterTypeError)
from .point_codec import point_encode, point_decode
from .keys        import (EcPublicKey, EcPrivateKey, public_key_from_jwk,
                          private_key_from_jwk, public_key_to_jwk,
                          private_key_to_jwk, public_key_from_bytes,
                          private_key_from_bytes)
from .providers   import (CurveProvider, KdfProvider, RandomSource, KeyPair,
                          CryptographyCurveProvider, CryptographyKdfProvider,
                          OsRandomSource, random_bytes)
from .kem         import EciesHkdfKemSender, EciesHkdfKemRecipient, KemKey

__all__ = [
    "CurveType", "PointFormat", "HashType",
    "curve_from_string", "curve_to_string", "hash_from_string",
    "field_size_in_bytes", "encoding_size_in_bytes",
    "EciesError", "SizeError", "KeyTypeError", "KeyFormatError",
    "InvalidPointError", "InvalidTokenError", "UnsupportedParameterError",
    "ProviderError", "ParameterTypeError",
    "point_encode", "point_decode",
    "EcPublicKey", "EcPrivateKey",
    "public_key_from_jwk", "private_key_from_jwk",
    "public_key_to_jwk", "private_key_to_jwk",
    "public_key_from_bytes", "private_key_from_bytes",
    "CurveProvider", "KdfProvider", "RandomSource", "KeyPair",
    "CryptographyCurveProvider", "CryptographyKdfProvider", "OsRandomSource",
    "random_bytes",
    "EciesHkdfKemSender", "EciesHkdfKemRecipient", "KemKey",
]
