"""
SymCodec Crypto Engine — block-cipher engines, profiles and errors.
"""

from .exceptions import (
    CodecError, KeyGenerationError, EncodingError,
    FramingError, DecodingError,
)
from .symmetric_base import SymmetricCipher
from .aes_crypto     import AESCBCCipher
from .profiles       import CipherProfile
from .cipher_factory import CipherFactory

__all__ = [
    # Errors
    "CodecError", "KeyGenerationError", "EncodingError",
    "FramingError", "DecodingError",
    # Engines
    "SymmetricCipher", "AESCBCCipher",
    "CipherProfile", "CipherFactory",
]
