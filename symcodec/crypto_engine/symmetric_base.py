"""
Abstract base class for the block-cipher engines used by SymCodec.

An engine is a stateless transform: the key is bound at construction,
the IV is supplied per call, and framing (IV ‖ ciphertext) is left to
the caller so every engine shares the same wire layout.
"""

from abc import ABC, abstractmethod


class SymmetricCipher(ABC):
    """
    Unified interface for chained-block symmetric encryption.

    encrypt() pads and encrypts; decrypt() decrypts and strips padding.
    Neither method authenticates the data.
    """

    @abstractmethod
    def encrypt(self, iv: bytes, plaintext: bytes) -> bytes:
        """Encrypt padded plaintext under *iv* → ciphertext."""

    @abstractmethod
    def decrypt(self, iv: bytes, ciphertext: bytes) -> bytes:
        """Decrypt ciphertext under *iv* and remove padding → plaintext."""

    @property
    @abstractmethod
    def cipher_name(self) -> str:
        """Human-readable name, e.g. 'AES-128-CBC'."""

    @property
    @abstractmethod
    def key_size(self) -> int:
        """Encryption key size in bytes."""

    @property
    @abstractmethod
    def block_size(self) -> int:
        """Cipher block size in bytes."""

    @property
    def iv_size(self) -> int:
        # chained-block modes take one block of IV
        return self.block_size

    @property
    def is_aead(self) -> bool:
        return False

    @property
    def key_size_bits(self) -> int:
        return self.key_size * 8

    def info(self) -> dict:
        """Return cipher metadata (never the key)."""
        return {
            "name":        self.cipher_name,
            "key_bits":    self.key_size_bits,
            "block_bytes": self.block_size,
            "iv_bytes":    self.iv_size,
            "aead":        self.is_aead,
            "auth_method": "None",
        }
