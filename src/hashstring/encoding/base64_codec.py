"""Unpadded Base64 with a timing-independent character mapping.

Salts and hash outputs are secret, so converting them to and from text must
not leak their bits through timing. The mapping between 6-bit values and
alphabet characters is therefore computed with mask arithmetic only: there is
no table indexed by the value and no branch taken on it. Every comparison
below works on values in the 0..255 range and returns 0xFF for "true" and
0x00 for "false", mirroring unsigned 32-bit wraparound with an explicit mask.

The alphabet is the standard one (``A-Z a-z 0-9 + /``). No ``=`` padding is
ever written or accepted.
"""

from __future__ import annotations

import logging

from hashstring.core.errors import (
    BinaryFormatError,
    CapacityError,
    DecodeCapacityError,
    TrailingDataError,
)

logger = logging.getLogger(__name__)

_WORD_MASK = 0xFFFFFFFF
INVALID = 0xFF

_A_UPPER = ord("A")
_Z_UPPER = ord("Z")
_A_LOWER = ord("a")
_Z_LOWER = ord("z")
_DIGIT_0 = ord("0")
_DIGIT_9 = ord("9")
_PLUS = ord("+")
_SLASH = ord("/")


def _eq(x: int, y: int) -> int:
    return ((((-(x ^ y)) & _WORD_MASK) >> 8) & 0xFF) ^ 0xFF


def _gt(x: int, y: int) -> int:
    return (((y - x) & _WORD_MASK) >> 8) & 0xFF


def _ge(x: int, y: int) -> int:
    return _gt(y, x) ^ 0xFF


def _lt(x: int, y: int) -> int:
    return _gt(y, x)


def _le(x: int, y: int) -> int:
    return _ge(y, x)


def _value_to_char(x: int) -> int:
    """Map a 6-bit value to the code of its Base64 character."""
    return (
        (_lt(x, 26) & (x + _A_UPPER))
        | (_ge(x, 26) & _lt(x, 52) & (x + (_A_LOWER - 26)))
        | (_ge(x, 52) & _lt(x, 62) & (x + (_DIGIT_0 - 52)))
        | (_eq(x, 62) & _PLUS)
        | (_eq(x, 63) & _SLASH)
    )


def _char_to_value(c: int) -> int:
    """Map a character code (0..255) to its 6-bit value, or INVALID.

    Invalid characters and 'A' both select zero from the ranges, so the
    result is forced to INVALID unless the character really was 'A'.
    """
    x = (
        (_ge(c, _A_UPPER) & _le(c, _Z_UPPER) & (c - _A_UPPER))
        | (_ge(c, _A_LOWER) & _le(c, _Z_LOWER) & (c - (_A_LOWER - 26)))
        | (_ge(c, _DIGIT_0) & _le(c, _DIGIT_9) & (c - (_DIGIT_0 - 52)))
        | (_eq(c, _PLUS) & 62)
        | (_eq(c, _SLASH) & 63)
    )
    return x | (_eq(x, 0) & (_eq(c, _A_UPPER) ^ 0xFF))


def encoded_length(data_len: int) -> int:
    olen = (data_len // 3) << 2
    rem = data_len % 3
    if rem:
        olen += rem + 1
    return olen


def encode_base64(data: bytes, capacity: int | None = None) -> str:
    """Encode bytes to unpadded Base64.

    ``capacity`` is the size of the destination including one terminator
    slot; when given and too small, CapacityError is raised before anything
    is produced.
    """
    olen = encoded_length(len(data))
    if capacity is not None and capacity <= olen:
        raise CapacityError(
            "Base64 destination too small",
            required=olen + 1,
            available=capacity,
        )

    out = bytearray()
    acc = 0
    acc_len = 0
    for byte in data:
        acc = ((acc << 8) | byte) & 0xFFFF
        acc_len += 8
        while acc_len >= 6:
            acc_len -= 6
            out.append(_value_to_char((acc >> acc_len) & 0x3F))
    if acc_len > 0:
        out.append(_value_to_char((acc << (6 - acc_len)) & 0x3F))
    return out.decode("ascii")


def decode_base64(data: bytes, pos: int = 0, capacity: int = 64) -> tuple[bytes, int]:
    """Decode Base64 characters from ``data`` starting at ``pos``.

    Decoding stops at the first byte outside the alphabet (or the end of
    input); its index is returned together with the decoded bytes. Raises
    DecodeCapacityError when more than ``capacity`` bytes would be produced
    and BinaryFormatError when the leftover bits cannot be canonical.
    """
    start = pos
    end = len(data)
    out = bytearray()
    acc = 0
    acc_len = 0
    while pos < end:
        d = _char_to_value(data[pos])
        if d == INVALID:
            break
        pos += 1
        acc = ((acc << 6) | d) & 0xFFF
        acc_len += 6
        if acc_len >= 8:
            acc_len -= 8
            if len(out) >= capacity:
                raise DecodeCapacityError(
                    "Decoded binary field exceeds its capacity",
                    required=len(out) + 1,
                    available=capacity,
                    position=pos - 1,
                )
            out.append((acc >> acc_len) & 0xFF)

    # Length 1 mod 4 leaves 6 unprocessed bits; otherwise 0, 2 or 4 remain
    # and they must all be zero.
    if acc_len > 4:
        raise BinaryFormatError("Base64 field has an invalid length", position=start)
    if acc & ((1 << acc_len) - 1):
        raise BinaryFormatError(
            "Base64 field has nonzero trailing bits", position=pos - 1
        )
    return bytes(out), pos


def b64encode(data: bytes) -> str:
    return encode_base64(data)


def b64decode(text: str | bytes, capacity: int | None = None) -> bytes:
    """Decode a complete Base64 string; every character must be consumed."""
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    if capacity is None:
        capacity = len(raw)
    decoded, pos = decode_base64(raw, 0, capacity)
    if pos != len(raw):
        logger.debug(f"Base64 text stopped early at offset {pos} of {len(raw)}")
        raise TrailingDataError("Unexpected character in Base64 text", position=pos)
    return decoded
