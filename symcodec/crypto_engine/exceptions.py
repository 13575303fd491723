"""
Error taxonomy for the codec.

    CodecError
    ├── KeyGenerationError   no usable key / cipher for the requested profile
    ├── EncodingError        forward transform failed
    ├── FramingError         blob rejected before any cipher operation
    └── DecodingError        reverse transform rejected the ciphertext

DecodingError keeps the length vs. padding distinction in ``reason``.
Callers that expose decode results to untrusted peers should collapse
the two into a single response: reporting them separately is exactly
what a padding-oracle attack needs.
"""


class CodecError(Exception):
    """Base class for every error raised by SymCodec."""


class KeyGenerationError(CodecError):
    """Requested cipher / key configuration is unavailable."""


class EncodingError(CodecError):
    """encode() could not complete the forward transform."""


class FramingError(CodecError):
    """Blob is not valid base64 or is too short to hold IV + ciphertext."""


class DecodingError(CodecError):
    """decode() could not recover a well-formed plaintext."""

    LENGTH  = "length"
    PADDING = "padding"
    TEXT    = "text"

    def __init__(self, message: str, reason: str):
        super().__init__(message)
        self.reason = reason

    def __reduce__(self):
        return type(self), (str(self), self.reason)
