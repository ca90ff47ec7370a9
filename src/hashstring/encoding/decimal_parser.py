from __future__ import annotations

from hashstring.core.errors import NumericFormatError, TrailingDataError
from hashstring.core.types import MAX_UNSIGNED

_DIGIT_0 = ord("0")
_DIGIT_9 = ord("9")


def decode_decimal(
    data: bytes, pos: int = 0, maximum: int = MAX_UNSIGNED
) -> tuple[int, int]:
    """Parse a minimal unsigned decimal integer starting at ``pos``.

    Returns the value and the index of the first non-digit byte. Overflow
    against ``maximum`` is detected before each multiply and add.
    """
    start = pos
    end = len(data)
    acc = 0
    while pos < end:
        c = data[pos]
        if c < _DIGIT_0 or c > _DIGIT_9:
            break
        digit = c - _DIGIT_0
        if acc > maximum // 10:
            raise NumericFormatError("Decimal value overflows", position=start)
        acc *= 10
        if digit > maximum - acc:
            raise NumericFormatError("Decimal value overflows", position=start)
        acc += digit
        pos += 1

    if pos == start:
        raise NumericFormatError("Expected a decimal digit", position=start)
    if data[start] == _DIGIT_0 and pos != start + 1:
        raise NumericFormatError(
            "Decimal value has a non-minimal encoding", position=start
        )
    return acc, pos


def parse_decimal(text: str | bytes, maximum: int = MAX_UNSIGNED) -> int:
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    value, pos = decode_decimal(raw, 0, maximum)
    if pos != len(raw):
        raise TrailingDataError("Unexpected character after decimal", position=pos)
    return value
