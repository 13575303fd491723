import os


class Settings:
    """Centralised codec configuration."""

    # ── application ──────────────────────────────────────────────
    APP_NAME    = "SymCodec"
    APP_VERSION = "1.0.0"

    # ── crypto defaults ──────────────────────────────────────────
    # Mode (CBC) and padding (PKCS7) are fixed; only the key length varies.
    DEFAULT_PROFILE = os.environ.get("SYMCODEC_PROFILE", "AES-128-CBC")
    TEXT_ENCODING   = "utf-8"

    # ── logging ──────────────────────────────────────────────────
    LOG_LEVEL       = os.environ.get("SYMCODEC_LOG_LEVEL", "INFO")
    LOG_FORMAT      = "[%(asctime)s] [%(levelname)-8s] %(name)s — %(message)s"
    LOG_DATE_FORMAT = "%H:%M:%S"
