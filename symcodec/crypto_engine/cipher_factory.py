"""
CipherFactory — cipher creation and discovery by profile.

Usage:
    cipher = CipherFactory.create(CipherProfile.AES_128_CBC, key)
    ct     = cipher.encrypt(iv, b"hello")
    pt     = cipher.decrypt(iv, ct)

    for profile in CipherFactory.list_profiles():
        print(CipherFactory.get_info(profile))
"""

import logging

from .symmetric_base import SymmetricCipher
from .aes_crypto     import AESCBCCipher
from .profiles       import CipherProfile
from .exceptions     import KeyGenerationError

logger = logging.getLogger("SymCodec.CipherFactory")


class CipherFactory:
    """Create any supported cipher from a profile and a raw key."""

    # ── Registry ─────────────────────────────────────────────────
    _REGISTRY: dict[CipherProfile, dict] = {
        CipherProfile.AES_128_CBC: {
            "class":    AESCBCCipher,
            "category": "CBC (unauthenticated)",
            "security": "High (128-bit), no integrity",
        },
        CipherProfile.AES_192_CBC: {
            "class":    AESCBCCipher,
            "category": "CBC (unauthenticated)",
            "security": "High (192-bit), no integrity",
        },
        CipherProfile.AES_256_CBC: {
            "class":    AESCBCCipher,
            "category": "CBC (unauthenticated)",
            "security": "Very High (256-bit), no integrity",
        },
    }

    # ── Factory method ───────────────────────────────────────────

    @classmethod
    def create(cls, profile, key: bytes) -> SymmetricCipher:
        """
        Create a cipher instance.

        Parameters
        ----------
        profile : CipherProfile | str | int
            Anything CipherProfile.from_value() accepts.
        key : bytes
            Exactly ``profile.key_size`` bytes.

        Raises
        ------
        KeyGenerationError
            Unknown profile, wrong key length, or backend without AES.
        """
        profile = CipherProfile.from_value(profile)
        if profile not in cls._REGISTRY:
            raise KeyGenerationError(f"No cipher registered for {profile.value}")

        if len(key) != profile.key_size:
            raise KeyGenerationError(
                f"{profile.value} needs a {profile.key_size}-byte key, "
                f"got {len(key)}"
            )

        cipher = cls._REGISTRY[profile]["class"](key)
        logger.debug(
            "Created cipher: %s (key=%d bits, block=%d bytes)",
            cipher.cipher_name, cipher.key_size_bits, cipher.block_size,
        )
        return cipher

    # ── Discovery ────────────────────────────────────────────────

    @classmethod
    def list_profiles(cls) -> list[CipherProfile]:
        """Return registered profiles, strongest key first."""
        return sorted(cls._REGISTRY, key=lambda p: p.key_bits, reverse=True)

    @classmethod
    def get_info(cls, profile) -> dict:
        """Return metadata for a profile."""
        profile = CipherProfile.from_value(profile)
        if profile not in cls._REGISTRY:
            raise KeyGenerationError(f"No cipher registered for {profile.value}")
        info = cls._REGISTRY[profile]
        return {
            "name":        profile.value,
            "key_bits":    profile.key_bits,
            "block_bytes": profile.block_size,
            "aead":        False,
            "category":    info["category"],
            "security":    info["security"],
        }

    @classmethod
    def get_all_info(cls) -> list[dict]:
        return [cls.get_info(p) for p in cls.list_profiles()]

    @classmethod
    def is_available(cls, profile) -> bool:
        try:
            return CipherProfile.from_value(profile) in cls._REGISTRY
        except KeyGenerationError:
            return False

    @classmethod
    def get_required_key_size(cls, profile) -> int:
        """Return required key size in bytes."""
        return CipherProfile.from_value(profile).key_size
