# nibblekit/__init__.py

"""nibblekit package.

Re-exports the conversion primitives so callers can simply
``from nibblekit import char_to_num, str_to_byte_array``.
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

from .logic import (
    INVALID_NIBBLE,
    INVALID_HEX_CHAR,
    MAX_U32_DIGITS,
    HEX_FIELD_WIDTH,
    char_to_num,
    num_to_char,
    is_hex_char,
    byte_swap_16,
    byte_swap_32,
    bcd_to_dec,
    dec_to_bcd,
    char_array_to_u32,
    get_byte_array_to_str_len,
    byte_array_to_str,
    str_to_byte_array,
    hex_text,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR", "HOMEPAGE", "about_text",
    # Logic
    "INVALID_NIBBLE", "INVALID_HEX_CHAR", "MAX_U32_DIGITS", "HEX_FIELD_WIDTH",
    "char_to_num", "num_to_char", "is_hex_char",
    "byte_swap_16", "byte_swap_32",
    "bcd_to_dec", "dec_to_bcd",
    "char_array_to_u32",
    "get_byte_array_to_str_len", "byte_array_to_str", "str_to_byte_array",
    "hex_text",
]
