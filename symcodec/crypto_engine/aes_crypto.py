"""
AES in Cipher Block Chaining mode with PKCS7 padding — 128 / 192 / 256
bit keys, 128-bit block.

CBC: each plaintext block is XOR-ed with the previous ciphertext block
(the IV for the first one) before encryption, so equal plaintext blocks
produce different ciphertext blocks.

PKCS7 always appends 1–16 bytes, each equal to the pad length:
    1 byte missing  → 01
    2 bytes missing → 02 02
    ...
    full block      → 10 10 … 10  (16 × 0x10)

⚠ No MAC. A peer that can submit modified ciphertexts and observe
   whether decryption failed on length or on padding has a padding
   oracle. Wrap the output in a MAC or use AES-GCM if that matters.
"""

import logging
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives import padding as sym_padding
from cryptography.exceptions import UnsupportedAlgorithm

from .symmetric_base import SymmetricCipher
from .exceptions import KeyGenerationError, EncodingError, DecodingError

logger = logging.getLogger("SymCodec.AES")


class AESCBCCipher(SymmetricCipher):
    """
    AES-CBC + PKCS7, unauthenticated.

    The IV is passed per call; the caller frames it as
    [IV 16B][ciphertext N×16B].
    """
    BLOCK_BITS = 128
    BLOCK_SIZE = BLOCK_BITS // 8
    KEY_SIZES  = (16, 24, 32)

    def __init__(self, key: bytes):
        if not isinstance(key, (bytes, bytearray)):
            raise KeyGenerationError(
                f"AES key must be bytes, got {type(key).__name__}"
            )
        if len(key) not in self.KEY_SIZES:
            raise KeyGenerationError(
                f"AES key must be 16, 24, or 32 bytes, got {len(key)}"
            )
        self._key = bytes(key)
        self._probe_backend()

    def _probe_backend(self):
        """Fail at construction if the backend cannot run AES-CBC."""
        try:
            Cipher(
                algorithms.AES(self._key), modes.CBC(bytes(self.BLOCK_SIZE))
            ).encryptor()
        except (UnsupportedAlgorithm, ValueError) as exc:
            raise KeyGenerationError(
                f"{self.cipher_name} is not available: {exc}"
            ) from exc

    def _cipher(self, iv: bytes) -> Cipher:
        return Cipher(algorithms.AES(self._key), modes.CBC(iv))

    # ── forward ──────────────────────────────────────────────────
    def encrypt(self, iv: bytes, plaintext: bytes) -> bytes:
        if len(iv) != self.BLOCK_SIZE:
            raise EncodingError(
                f"IV must be {self.BLOCK_SIZE} bytes, got {len(iv)}"
            )
        try:
            padder = sym_padding.PKCS7(self.BLOCK_BITS).padder()
            padded = padder.update(plaintext) + padder.finalize()
            enc    = self._cipher(iv).encryptor()
            ct     = enc.update(padded) + enc.finalize()
        except (ValueError, TypeError) as exc:
            raise EncodingError(f"{self.cipher_name} encryption failed: "
                                f"{exc}") from exc
        logger.debug("Encrypted %d bytes → %d bytes", len(plaintext), len(ct))
        return ct

    # ── reverse ──────────────────────────────────────────────────
    def decrypt(self, iv: bytes, ciphertext: bytes) -> bytes:
        if len(iv) != self.BLOCK_SIZE:
            raise DecodingError(
                f"IV must be {self.BLOCK_SIZE} bytes, got {len(iv)}",
                DecodingError.LENGTH,
            )
        if not ciphertext or len(ciphertext) % self.BLOCK_SIZE:
            raise DecodingError(
                f"Ciphertext length {len(ciphertext)} is not a positive "
                f"multiple of the {self.BLOCK_SIZE}-byte block",
                DecodingError.LENGTH,
            )
        try:
            dec    = self._cipher(iv).decryptor()
            padded = dec.update(ciphertext) + dec.finalize()
        except ValueError as exc:
            raise DecodingError(f"{self.cipher_name} decryption failed: "
                                f"{exc}", DecodingError.LENGTH) from exc
        try:
            unpad = sym_padding.PKCS7(self.BLOCK_BITS).unpadder()
            return unpad.update(padded) + unpad.finalize()
        except ValueError as exc:
            raise DecodingError("Bad padding", DecodingError.PADDING) from exc

    @property
    def cipher_name(self) -> str:
        return f"AES-{len(self._key) * 8}-CBC"

    @property
    def key_size(self) -> int:
        return len(self._key)

    @property
    def block_size(self) -> int:
        return self.BLOCK_SIZE

    def __repr__(self) -> str:
        return f"<AESCBCCipher {self.cipher_name}>"
