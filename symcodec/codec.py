"""
SymmetricCodec — encode short text messages with AES-CBC and a fresh
random IV per message.

    blob = base64( IV ‖ AES-CBC-PKCS7(key, IV, utf8(plaintext)) )

The codec generates its key once, at construction, and keeps it for its
whole lifetime. There is no accessor, no export and no rotation; two
codecs never share a key, so a blob can only be decoded by the instance
that produced it.

⚠ Confidentiality only. Blobs are not authenticated: a modified blob may
   decode to different text, and decode() reports length and padding
   failures separately (DecodingError.reason), which is a padding oracle
   if surfaced to an attacker.
"""

import logging

from .config.settings import Settings
from .crypto_engine import (
    CipherFactory, CipherProfile,
    KeyGenerationError, EncodingError, FramingError, DecodingError,
)
from .utils.random_gen import SecureRandom
from .utils.framing import Framing

logger = logging.getLogger("SymCodec.Codec")


class SymmetricCodec:
    """
    Owns one secret key and exposes encode() / decode().

    Parameters
    ----------
    profile : CipherProfile | str | int | None
        Cipher profile, its name, or a key length in bits.
        Defaults to ``Settings.DEFAULT_PROFILE`` (AES-128-CBC).
    random_source : SecureRandom | None
        Source for the key and every IV. Defaults to a private
        SecureRandom instance.
    """

    def __init__(self, profile=None, random_source: SecureRandom | None = None):
        self._profile = CipherProfile.from_value(
            Settings.DEFAULT_PROFILE if profile is None else profile
        )
        self._random = random_source if random_source is not None \
            else SecureRandom()

        # Only need to generate the key once
        key = self._generate_key()
        self._cipher = CipherFactory.create(self._profile, key)
        logger.debug("Codec ready: %s", self._cipher.cipher_name)

    def _generate_key(self) -> bytes:
        size = self._profile.key_size
        try:
            key = self._random.generate_key(size)
        except (OSError, NotImplementedError, ValueError) as exc:
            raise KeyGenerationError(
                f"Random source failed to produce a {size}-byte key: {exc}"
            ) from exc
        if not isinstance(key, (bytes, bytearray)) or len(key) != size:
            raise KeyGenerationError(
                f"Random source returned an invalid {self._profile.value} key"
            )
        return bytes(key)

    # ── encode ───────────────────────────────────────────────────
    def encode(self, plaintext: str) -> bytes:
        """
        Encrypt *plaintext* and return the base64 blob (ASCII bytes).

        A new IV is drawn for every call, so encoding the same text twice
        yields different blobs.
        """
        if not isinstance(plaintext, str):
            raise TypeError(
                f"plaintext must be str, got {type(plaintext).__name__}"
            )
        try:
            return self._encode(plaintext)
        except EncodingError as exc:
            logger.debug("Could not encode message: %s", exc)
            raise

    def _encode(self, plaintext: str) -> bytes:
        size = self._cipher.iv_size
        try:
            iv = self._random.generate_iv(size)
        except (OSError, NotImplementedError, ValueError) as exc:
            raise EncodingError(
                f"Random source failed to produce a {size}-byte IV: {exc}"
            ) from exc
        if not isinstance(iv, (bytes, bytearray)) or len(iv) != size:
            raise EncodingError(
                f"Random source returned an invalid IV, expected {size} bytes"
            )

        try:
            data = plaintext.encode(Settings.TEXT_ENCODING)
        except UnicodeEncodeError as exc:
            raise EncodingError(
                f"Plaintext is not encodable as {Settings.TEXT_ENCODING}"
            ) from exc

        ciphertext = self._cipher.encrypt(bytes(iv), data)
        blob = Framing.pack(bytes(iv), ciphertext)
        logger.debug(
            "Encoded %d plaintext bytes → %d byte blob", len(data), len(blob)
        )
        return blob

    # ── decode ───────────────────────────────────────────────────
    def decode(self, blob) -> str:
        """
        Reverse encode(). Accepts the blob as bytes or str.

        Raises FramingError before touching the key when the blob is not
        base64 or is shorter than IV + 1 byte, and DecodingError when the
        cipher rejects the ciphertext.
        """
        try:
            return self._decode(blob)
        except FramingError as exc:
            logger.debug("Rejected malformed blob: %s", exc)
            raise
        except DecodingError as exc:
            logger.debug("Could not decode message: %s (%s)", exc, exc.reason)
            raise

    def _decode(self, blob) -> str:
        iv, ciphertext = Framing.unpack(blob, self._cipher.iv_size)
        data = self._cipher.decrypt(iv, ciphertext)
        try:
            return data.decode(Settings.TEXT_ENCODING)
        except UnicodeDecodeError as exc:
            raise DecodingError(
                f"Recovered plaintext is not valid {Settings.TEXT_ENCODING}",
                DecodingError.TEXT,
            ) from exc

    # ── metadata ─────────────────────────────────────────────────
    @property
    def profile(self) -> CipherProfile:
        return self._profile

    @property
    def iv_size(self) -> int:
        return self._cipher.iv_size

    @property
    def block_size(self) -> int:
        return self._cipher.block_size

    @property
    def key_size_bits(self) -> int:
        return self._cipher.key_size_bits

    def info(self) -> dict:
        return self._cipher.info()

    def __repr__(self) -> str:
        return f"<SymmetricCodec {self._profile.value}>"
