"""
SymCodec — Cipher Verification Script

Run this to check every profile works as expected:
    python -m symcodec.verify_ciphers
"""

import sys
import base64
import logging

from symcodec import configure_logging
from symcodec.codec import SymmetricCodec
from symcodec.crypto_engine import CipherFactory, CodecError, DecodingError
from symcodec.utils.hexfmt import bytes_to_hex

logger = logging.getLogger("SymCodec.Verify")

TEST_MESSAGES = [
    "Hello World!",
    "",                                     # empty
    "\x00" * 100,                           # null chars
    "A" * 10_000,                           # 10 KB
    "Grüße, 世界 🌍",                         # multi-byte UTF-8
]


def _expected_length(text: str, block: int) -> int:
    n = len(text.encode("utf-8"))
    return block + (n // block + 1) * block


def check_round_trip(codec: SymmetricCodec) -> bool:
    for msg in TEST_MESSAGES:
        blob = codec.encode(msg)
        if codec.decode(blob) != msg:
            logger.error("%r: round trip mismatch", codec)
            return False
        framed = base64.b64decode(blob)
        if len(framed) != _expected_length(msg, codec.block_size):
            logger.error("%r: unexpected blob length %d", codec, len(framed))
            return False
    return True


def check_iv_freshness(codec: SymmetricCodec) -> bool:
    first  = codec.encode("same message")
    second = codec.encode("same message")
    return first != second


def check_tamper(codec: SymmetricCodec) -> bool:
    original = "Test tamper detection"
    tampered = bytearray(base64.b64decode(codec.encode(original)))
    tampered[-1] ^= 0x01
    try:
        decoded = codec.decode(base64.b64encode(bytes(tampered)))
    except DecodingError as exc:
        logger.info("  tamper → DecodingError (%s)", exc.reason)
        return True
    # no MAC: a different plaintext is acceptable, the same one is not
    return decoded != original


def check_wrong_key(profile) -> bool:
    codec_a = SymmetricCodec(profile)
    codec_b = SymmetricCodec(profile)
    blob = codec_a.encode("Secret message")
    try:
        return codec_b.decode(blob) != "Secret message"
    except CodecError:
        return True


def demo(codec: SymmetricCodec, plaintext: str = "Hello World!", rounds: int = 3):
    """Print IV, ciphertext and plaintext of a few encodings. Never the key."""
    for _ in range(rounds):
        blob    = codec.encode(plaintext)
        decoded = codec.decode(blob)
        framed  = base64.b64decode(blob)
        iv, ct  = framed[:codec.iv_size], framed[codec.iv_size:]

        print("-------------------------------------------")
        print("Init Vector: " + bytes_to_hex(iv))
        print("Encrypted:   " + bytes_to_hex(ct))
        print("Decrypted:   " + bytes_to_hex(decoded.encode("utf-8")))
        print("-------------------------------------------")
        print("Plain Text:  " + plaintext)
        print("Encrypted:   " + base64.b64encode(ct).decode("ascii"))
        print("Decrypted:   " + decoded)
    print("-------------------------------------------")


def run_checks() -> bool:
    all_pass = True
    checks = [
        ("Round-Trip",   check_round_trip),
        ("IV Freshness", check_iv_freshness),
        ("Tamper",       check_tamper),
    ]

    for profile in CipherFactory.list_profiles():
        codec = SymmetricCodec(profile)
        for label, check in checks:
            try:
                ok = check(codec)
            except CodecError as exc:
                logger.error("%-12s %-14s ERROR: %s", profile.value, label, exc)
                ok = False
            all_pass &= ok
            logger.info("%-12s %-14s %s", profile.value, label,
                        "OK" if ok else "FAILED")
        ok = check_wrong_key(profile)
        all_pass &= ok
        logger.info("%-12s %-14s %s", profile.value, "Wrong Key",
                    "OK" if ok else "FAILED")

    return all_pass


def main() -> int:
    configure_logging()
    all_pass = run_checks()
    demo(SymmetricCodec())
    if all_pass:
        logger.info("ALL CHECKS PASSED")
        return 0
    logger.error("SOME CHECKS FAILED")
    return 1


if __name__ == "__main__":
    sys.exit(main())
