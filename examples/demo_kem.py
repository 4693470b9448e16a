"""
ecies_kem — Live Demo: ECIES-HKDF KEM on every curve
====================================================
Run:  python examples/demo_kem.py

For each curve and point format, a sender derives a key for a recipient's
static public key and the recipient recovers it from the token alone.
Timing, token size and key size are printed for each.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ecies_kem import (
    CurveType, PointFormat, HashType,
    EciesHkdfKemSender, EciesHkdfKemRecipient, CryptographyCurveProvider,
    public_key_to_jwk, random_bytes,
)

LINE = "═" * 70
INFO = b"ecies-kem demo"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(name)s: %(message)s')

    print(f"\n{LINE}")
    print("  ecies_kem — ECIES-HKDF Key Encapsulation Demo")
    print(LINE)

    provider = CryptographyCurveProvider()
    for curve in CurveType:
        header(f"{curve.value}")
        pair      = provider.generate_key_pair(curve)
        jwk       = public_key_to_jwk(pair.public_key)
        sender    = EciesHkdfKemSender.new_instance(jwk)
        recipient = EciesHkdfKemRecipient.new_instance(pair.private_key)
        ok("Recipient JWK x", jwk["x"][:32] + "...")

        for fmt in PointFormat:
            salt = random_bytes(16)
            t0 = time.perf_counter()
            kem_key = sender.encapsulate(32, fmt, HashType.SHA256, INFO, salt)
            key = recipient.decapsulate(kem_key.token, 32, fmt, HashType.SHA256,
                                        INFO, salt)
            elapsed = time.perf_counter() - t0
            assert key == kem_key.key
            ok(f"{fmt.name:<32}", f"token={len(kem_key.token)}B "
                                  f"key={len(key)}B  {elapsed*1000:.2f} ms")

    print(f"\n{LINE}")
    print("  All curves: PASSED")
    print(f"{LINE}\n")
