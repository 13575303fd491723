"""
Cipher profiles — each one fixes algorithm, mode, padding, key length
and block size together, so no invalid combination can be expressed.
"""

from enum import Enum

from .exceptions import KeyGenerationError


class CipherProfile(Enum):
    AES_128_CBC = "AES-128-CBC"
    AES_192_CBC = "AES-192-CBC"
    AES_256_CBC = "AES-256-CBC"

    @property
    def key_bits(self) -> int:
        return int(self.value.split("-")[1])

    @property
    def block_bits(self) -> int:
        return 128

    @property
    def key_size(self) -> int:
        return self.key_bits // 8

    @property
    def block_size(self) -> int:
        return self.block_bits // 8

    @classmethod
    def from_value(cls, value) -> "CipherProfile":
        """
        Resolve a profile from a member, a name such as "aes-256-cbc"
        or "AES_256_CBC", or a key length in bits (128 / 192 / 256).
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            for profile in cls:
                if profile.key_bits == value:
                    return profile
            raise KeyGenerationError(
                f"Unsupported key length: {value} bits "
                f"(expected 128, 192 or 256)"
            )
        if isinstance(value, str):
            wanted = value.strip().upper().replace("_", "-")
            for profile in cls:
                if profile.value == wanted:
                    return profile
        raise KeyGenerationError(
            f"Unknown cipher profile: {value!r}. "
            f"Available: {[p.value for p in cls]}"
        )
