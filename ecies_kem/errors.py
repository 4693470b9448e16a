"""
Errors
======
Every failure raised by ecies_kem derives from EciesError, and also from
the closest built-in exception so callers that already catch ValueError
or TypeError keep working.

Messages are stable and safe to match on.
"""


class EciesError(Exception):
    """Root of the ecies_kem error hierarchy."""


class SizeError(EciesError, ValueError):
    """Requested output length is not a positive integer, or too large."""


class KeyTypeError(EciesError, TypeError):
    """A public key was supplied where a private key is required, or vice versa."""


class KeyFormatError(EciesError, ValueError):
    """An external key representation is missing fields or malformed."""


class InvalidPointError(EciesError, ValueError):
    """Bytes do not decode to a point on the curve."""


class InvalidTokenError(InvalidPointError):
    """A KEM token could not be turned into a valid ephemeral public key."""


class UnsupportedParameterError(EciesError, ValueError):
    """Unknown curve, hash or point format."""


class ProviderError(EciesError, RuntimeError):
    """The underlying curve or KDF provider rejected its input."""


class ParameterTypeError(EciesError, TypeError):
    """A per-call parameter such as info, salt or token is not bytes."""
