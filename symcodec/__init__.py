"""
SymCodec — AES-CBC text codec with a random IV per message.
"""

import logging

from .config.settings import Settings
from .codec import SymmetricCodec
from .crypto_engine import (
    CipherProfile, CipherFactory,
    CodecError, KeyGenerationError, EncodingError,
    FramingError, DecodingError,
)

__version__ = Settings.APP_VERSION

__all__ = [
    "SymmetricCodec", "CipherProfile", "CipherFactory",
    "CodecError", "KeyGenerationError", "EncodingError",
    "FramingError", "DecodingError",
    "configure_logging",
]

logging.getLogger(Settings.APP_NAME).addHandler(logging.NullHandler())


def configure_logging(level: str | int | None = None) -> logging.Handler:
    """
    Send SymCodec (and other) log records to the console.

    Safe to call repeatedly: the console handler is installed once and
    later calls only change the level.
    """
    level = level or Settings.LOG_LEVEL
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        if getattr(handler, "_symcodec_console", False):
            handler.setLevel(level)
            return handler

    console_handler = logging.StreamHandler()
    console_handler._symcodec_console = True
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        Settings.LOG_FORMAT, datefmt=Settings.LOG_DATE_FORMAT,
    ))
    root_logger.addHandler(console_handler)
    return console_handler
