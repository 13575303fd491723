"""
Wire framing for SymCodec blobs.

Blob layout (before text encoding):
    [IV — one cipher block, 16 bytes for AES]
    [ciphertext — N × block size, N ≥ 1]

No length prefix, no version tag, no MAC: the IV / ciphertext boundary
is fixed by the block size. The framed bytes travel as standard base64.
"""

import base64
import binascii

from ..crypto_engine.exceptions import FramingError


class Framing:

    @staticmethod
    def frame(iv: bytes, ciphertext: bytes) -> bytes:
        return iv + ciphertext

    @staticmethod
    def split(framed: bytes, iv_size: int) -> tuple[bytes, bytes]:
        """Return *(iv, ciphertext)*."""
        if len(framed) < iv_size + 1:
            raise FramingError(
                f"Blob too short: {len(framed)} bytes, need at least "
                f"{iv_size} IV bytes plus ciphertext"
            )
        return framed[:iv_size], framed[iv_size:]

    @staticmethod
    def text_encode(data: bytes) -> bytes:
        return base64.b64encode(data)

    @staticmethod
    def text_decode(blob) -> bytes:
        if isinstance(blob, str):
            try:
                blob = blob.encode("ascii")
            except UnicodeEncodeError as exc:
                raise FramingError("Blob contains non-ASCII characters") from exc
        elif isinstance(blob, (bytes, bytearray, memoryview)):
            blob = bytes(blob)
        else:
            raise TypeError(
                f"Blob must be bytes or str, got {type(blob).__name__}"
            )
        try:
            return base64.b64decode(blob, validate=True)
        except binascii.Error as exc:
            raise FramingError(f"Blob is not valid base64: {exc}") from exc

    # ── combined ─────────────────────────────────────────────────
    @staticmethod
    def pack(iv: bytes, ciphertext: bytes) -> bytes:
        return Framing.text_encode(Framing.frame(iv, ciphertext))

    @staticmethod
    def unpack(blob, iv_size: int) -> tuple[bytes, bytes]:
        return Framing.split(Framing.text_decode(blob), iv_size)
