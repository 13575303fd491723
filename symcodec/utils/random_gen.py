"""
Cryptographically-secure random value generators.

A codec owns its own SecureRandom instance; tests can hand it a
DeterministicRandom (or any object with the same methods) instead.
"""

import os
import hashlib


class SecureRandom:

    def generate_bytes(self, length: int) -> bytes:
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        return os.urandom(length)

    def generate_key(self, length: int = 16) -> bytes:
        return self.generate_bytes(length)

    def generate_iv(self, length: int = 16) -> bytes:
        return self.generate_bytes(length)


class DeterministicRandom(SecureRandom):
    """
    Reproducible byte stream: SHA-256(seed ‖ counter) blocks.

    For tests only — the output is fully predictable from the seed.
    """

    def __init__(self, seed: bytes = b"symcodec"):
        self._seed    = seed
        self._counter = 0
        self._buffer  = b""

    def generate_bytes(self, length: int) -> bytes:
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        while len(self._buffer) < length:
            block = hashlib.sha256(
                self._seed + self._counter.to_bytes(8, "big")
            ).digest()
            self._counter += 1
            self._buffer  += block
        out, self._buffer = self._buffer[:length], self._buffer[length:]
        return out
