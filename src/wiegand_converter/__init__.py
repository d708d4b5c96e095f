# wiegand_converter/__init__.py

"""Wiegand Converter package.

Re-exports the codec for convenient imports in tests or other code.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
    HOMEPAGE,
)

from .errors import (
    WiegandError,
    EmptyInput,
    InvalidFormat,
    OutOfRange,
    ParityCheckFailed,
)

from .logic import (
    WORD_BITS,
    WORD_MAX,
    FACILITY_MAX,
    CARD_MAX,
    ConversionResult,
    InputMode,
    convert,
    decode,
    encode,
    expected_parity,
    format_binary,
    format_hex,
    parity_bits,
    parse_card_number,
    parse_facility_text,
    parse_word26_decimal,
    parse_word26_hex,
    popcount,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR", "HOMEPAGE",
    # Errors
    "WiegandError", "EmptyInput", "InvalidFormat", "OutOfRange", "ParityCheckFailed",
    # Logic
    "WORD_BITS", "WORD_MAX", "FACILITY_MAX", "CARD_MAX",
    "ConversionResult", "InputMode", "convert", "decode", "encode",
    "expected_parity", "format_binary", "format_hex", "parity_bits",
    "parse_card_number", "parse_facility_text",
    "parse_word26_decimal", "parse_word26_hex", "popcount",
]
