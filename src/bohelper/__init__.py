# bohelper/__init__.py

"""Byte offset helper.

Re-exports the hex string core for convenient imports in tests or other code.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
    HOMEPAGE,
    about_text,
)

from .hexstring import (
    DEFAULT_ENDIANNESS,
    CANONICAL_HEX_DIGIT_RANGES,
    HEX_DIGIT_RANGES,
    NATIVE_WORD_BITS,
    NATIVE_WORD_MAX,
    BoHelperError,
    Endianness,
    HexByte,
    HexString,
    InvalidHexFragment,
    char_to_hex_bytes,
    hex_bytes_to_strs,
    is_hex_digit,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR", "HOMEPAGE", "about_text",
    # Core
    "DEFAULT_ENDIANNESS", "CANONICAL_HEX_DIGIT_RANGES", "HEX_DIGIT_RANGES", "NATIVE_WORD_BITS", "NATIVE_WORD_MAX",
    "BoHelperError", "Endianness", "HexByte", "HexString", "InvalidHexFragment",
    "char_to_hex_bytes", "hex_bytes_to_strs", "is_hex_digit",
]
