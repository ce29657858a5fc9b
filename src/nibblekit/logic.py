# nibblekit/logic.py

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)

CharLike = Union[str, bytes, int]
TextLike = Union[str, bytes, bytearray, memoryview]

# Reserved sentinels: neither is a valid result of its conversion.
INVALID_NIBBLE = 0xFF
INVALID_HEX_CHAR = "Z"

MAX_U32_DIGITS = 8
HEX_FIELD_WIDTH = 3  # "XX "

_NUL = 0x00
_SPACE = 0x20


# ---------------- Character helpers ----------------
def _code(ch: CharLike) -> int:
    """Code point of a one-char str / one-byte bytes, or the int unchanged; -1 otherwise."""
    if isinstance(ch, (str, bytes, bytearray)):
        if len(ch) != 1:
            return -1
        return ord(ch)
    if isinstance(ch, int) and not isinstance(ch, bool):
        return ch
    return -1

def _ascii_upper(code: int) -> int:
    # C-locale toupper: only a-z are touched
    if 0x61 <= code <= 0x7A:
        return code - 0x20
    return code


# ---------------- Nibble / character ----------------
def char_to_num(ch: CharLike) -> int:
    """Map a hex digit to its nibble value.

    '0'-'9' → 0..9, 'a'-'f' / 'A'-'F' → 10..15.
    Anything else returns ``INVALID_NIBBLE`` (0xFF), a reserved sentinel
    and never a nibble. Accepts a one-character str, a one-byte bytes
    or an ASCII code; any other value also yields the sentinel.
    """
    c = _code(ch)
    if 0x30 <= c <= 0x39:
        return c - 0x30
    if 0x61 <= c <= 0x66:
        return c - 0x61 + 10
    if 0x41 <= c <= 0x46:
        return c - 0x41 + 10
    return INVALID_NIBBLE

def num_to_char(num: int) -> str:
    """Map 0..15 to '0'-'9' / 'A'-'F'; anything else returns ``INVALID_HEX_CHAR`` ('Z')."""
    if 0 <= num <= 9:
        return chr(0x30 + num)
    if 10 <= num <= 15:
        return chr(0x41 + num - 10)
    return INVALID_HEX_CHAR

def is_hex_char(ch: CharLike) -> bool:
    return char_to_num(ch) != INVALID_NIBBLE


# ---------------- Byte order ----------------
def byte_swap_16(value: int) -> int:
    v = value & 0xFFFF
    return ((v & 0xFF00) >> 8) | ((v & 0x00FF) << 8)

def byte_swap_32(value: int) -> int:
    v = value & 0xFFFFFFFF
    return (
        ((v & 0xFF000000) >> 24)
        | ((v & 0x00FF0000) >> 8)
        | ((v & 0x0000FF00) << 8)
        | ((v & 0x000000FF) << 24)
    )


# ---------------- BCD ----------------
def bcd_to_dec(bcd: int) -> int:
    """Packed BCD byte → decimal. Nibbles above 9 are not rejected (0xFF → 165)."""
    b = bcd & 0xFF
    return ((b & 0xF0) >> 4) * 10 + (b & 0x0F)

def dec_to_bcd(dec: int) -> int:
    """
    Decimal 0..99 → packed BCD byte.
    Above 99 the tens digit no longer fits a nibble: it spills into
    the high nibble as-is and is cut at 8 bits (123 → 0xC3, 160 → 0x00).
    """
    d = dec & 0xFF
    return (((d // 10) << 4) | (d % 10)) & 0xFF


# ---------------- Hex text → integer ----------------
def char_array_to_u32(src: Optional[TextLike], src_len: int) -> Tuple[bool, int]:
    """Accumulate up to ``MAX_U32_DIGITS`` hex characters into a 32-bit value.

    Returns ``(ok, value)``. ``ok`` is False, and value 0, when ``src``
    is absent or ``src_len`` is zero. Characters past the eighth are
    ignored. A negative ``src_len`` raises ValueError.

    Digits are not validated: a non-hex character contributes the 0xFF
    sentinel, which is OR'd in as-is and spills into the previous
    nibble ("G1" → 0xFF1, "1G" → 0xFF).
    """
    if src_len < 0:
        raise ValueError("src_len must be >= 0")
    if src is None or not src_len:
        logger.debug("char_array_to_u32 declined: src=%r src_len=%r", src, src_len)
        return False, 0

    n = min(src_len, MAX_U32_DIGITS)
    if n > len(src):
        raise ValueError(f"src_len {src_len} exceeds source length {len(src)}")
    if src_len > MAX_U32_DIGITS:
        logger.debug("char_array_to_u32 truncating %d characters to %d", src_len, n)

    acc = 0
    for i in range(n):
        nibble = char_to_num(_ascii_upper(_code(src[i])))
        acc = ((acc << 4) | nibble) & 0xFFFFFFFF
    return True, acc


# ---------------- Byte array ↔ hex text ----------------
def get_byte_array_to_str_len(byte_array_len: int) -> int:
    """Buffer size needed by ``byte_array_to_str``: 0 for 0, else 3*n + 1."""
    if byte_array_len < 0:
        raise ValueError("byte_array_len must be >= 0")
    if not byte_array_len:
        return 0
    return byte_array_len * HEX_FIELD_WIDTH + 1

def byte_array_to_str(out, byte_array, byte_array_len: int) -> bool:
    """Encode bytes as "XX " fields into a caller-owned buffer, then a NUL.

    ``out`` must be a writable buffer (bytearray / memoryview) of at least
    ``get_byte_array_to_str_len(byte_array_len)`` items; it is written by
    index and never grown. Returns False when ``out`` or ``byte_array``
    is absent or the length is zero.

    [0x01, 0xAB, 0xFF] → b"01 AB FF \\x00"
    """
    if byte_array_len < 0:
        raise ValueError("byte_array_len must be >= 0")
    if out is None or byte_array is None or not byte_array_len:
        logger.debug(
            "byte_array_to_str declined: out=%s byte_array=%s len=%r",
            "None" if out is None else "buffer",
            "None" if byte_array is None else "buffer",
            byte_array_len,
        )
        return False

    if byte_array_len > len(byte_array):
        raise ValueError(
            f"byte_array_len {byte_array_len} exceeds byte array length {len(byte_array)}"
        )
    need = get_byte_array_to_str_len(byte_array_len)
    if len(out) < need:
        raise ValueError(f"Output buffer too small: {len(out)} < {need}")

    pos = 0
    for i in range(byte_array_len):
        b = byte_array[i] & 0xFF
        out[pos] = ord(num_to_char(b >> 4))
        out[pos + 1] = ord(num_to_char(b & 0x0F))
        out[pos + 2] = _SPACE
        pos += HEX_FIELD_WIDTH
    out[pos] = _NUL
    return True

def _digit_value(code: int) -> int:
    # No validation: anything above '9' is treated as a letter.
    c = _ascii_upper(code)
    if c > 0x39:
        return (c - 0x37) & 0xFF
    return (c - 0x30) & 0xFF

def str_to_byte_array(out, text: Optional[TextLike], str_len: int) -> int:
    """Decode hex text into a caller-owned buffer; return the number of bytes written.

    Spaces and NULs are skipped one at a time, so "01  AB" and
    "01 AB FF \\0" decode like "01ABFF". Every other position starts a
    two-character pair.

    No input validation: the caller guarantees well-formed hex text.
    Non-hex characters go through the same offset arithmetic as real
    digits and yield garbage nibbles. A pair cut short by the end of
    ``text`` reads its missing half as NUL.

    Returns 0 when ``out`` or ``text`` is absent or ``str_len`` is zero;
    a negative ``str_len`` raises ValueError.
    Scanning stops at ``min(str_len, len(text))``.
    """
    if str_len < 0:
        raise ValueError("str_len must be >= 0")
    if out is None or text is None or not str_len:
        logger.debug(
            "str_to_byte_array declined: out=%s text=%r str_len=%r",
            "None" if out is None else "buffer", text, str_len,
        )
        return 0

    end = min(str_len, len(text))
    count = 0
    i = 0
    while i < end:
        c = _code(text[i])
        if c == _SPACE or c == _NUL:
            i += 1
            continue

        lo_code = _code(text[i + 1]) if i + 1 < len(text) else _NUL
        hi = _digit_value(c)
        lo = _digit_value(lo_code)

        if count >= len(out):
            raise ValueError(f"Output buffer too small: {len(out)} bytes")
        out[count] = ((hi << 4) | lo) & 0xFF
        count += 1
        i += 2
    return count

def hex_text(buf) -> str:
    """ASCII text held in ``buf`` up to (not including) the first NUL."""
    return bytes(buf).split(b"\0", 1)[0].decode("latin-1")
