"""
ECIES-HKDF key derivation, shared by sender and recipient.

    IKM = token || shared_secret
    key = HKDF(hash, IKM, salt, info, key_size)

Both sides must build IKM byte-for-byte the same way. The token goes
first, matching the published cross-implementation vectors.
"""

from ..curves import HashType
from ..providers import KdfProvider


def compute_ecies_hkdf_symmetric_key(kdf: KdfProvider, token: bytes,
                                     shared_secret: bytes, hash_type: HashType,
                                     salt: bytes, info: bytes,
                                     key_size: int) -> bytes:
    ikm = token + shared_secret
    return kdf.hkdf(hash_type, ikm, salt, info, key_size)
