"""Decoder and encoder for Argon2i hash strings.

Format::

    $argon2i$m=<num>,t=<num>,p=<num>[,keyid=<bin>][,data=<bin>][$<bin>[$<bin>]]

``<num>`` is a minimal decimal integer and ``<bin>`` is unpadded Base64. The
two trailing binary chunks are, in order, the salt and the output; an output
cannot appear without a salt. Decoding either yields a complete record or
raises a ParseError; there is no partial result.

Offsets reported in errors are byte offsets into the UTF-8 form of the input.
"""

from __future__ import annotations

import logging

from hashstring.core.buffer import OutputBuffer
from hashstring.core.errors import (
    GrammarError,
    ParseError,
    RangeViolationError,
    TrailingDataError,
)
from hashstring.core.types import (
    ALGORITHM_ID,
    ASSOCIATED_DATA_CAPACITY,
    KEY_ID_CAPACITY,
    MAX_HASH_STRING_LENGTH,
    MAX_PARALLELISM,
    MEMORY_PER_LANE,
    OUTPUT_CAPACITY,
    OUTPUT_MIN_LENGTH,
    SALT_CAPACITY,
    SALT_MIN_LENGTH,
)
from hashstring.encoding.base64_codec import decode_base64, encode_base64
from hashstring.encoding.base64_codec import encoded_length as b64_length
from hashstring.encoding.decimal_parser import decode_decimal
from hashstring.phc.models import ParsedRecord

logger = logging.getLogger(__name__)

ALGORITHM_PREFIX = f"${ALGORITHM_ID}"
PARAMS_PREFIX = "$m="
T_PREFIX = ",t="
P_PREFIX = ",p="
KEY_ID_PREFIX = ",keyid="
DATA_PREFIX = ",data="
SEPARATOR = "$"


class _Cursor:
    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.data)

    def accept(self, literal: str) -> bool:
        raw = literal.encode("ascii")
        if self.data.startswith(raw, self.pos):
            self.pos += len(raw)
            return True
        return False

    def expect(self, literal: str) -> None:
        if not self.accept(literal):
            raise GrammarError(f"Expected {literal!r}", position=self.pos)

    def decimal(self) -> int:
        value, self.pos = decode_decimal(self.data, self.pos)
        return value

    def binary(self, capacity: int) -> bytes:
        value, self.pos = decode_base64(self.data, self.pos, capacity)
        return value


def _check_cost(name: str, value: int, position: int) -> None:
    # Shift instead of comparing with 2^32-1 directly so the bound does not
    # depend on integer width.
    if value < 1 or (value >> 30) > 3:
        raise RangeViolationError(
            f"{name} must be between 1 and 2^32-1", field=name, position=position
        )


def _decode(data: bytes) -> ParsedRecord:
    cursor = _Cursor(data)

    cursor.expect(ALGORITHM_PREFIX)
    cursor.expect(PARAMS_PREFIX)
    m_pos = cursor.pos
    m = cursor.decimal()
    cursor.expect(T_PREFIX)
    t_pos = cursor.pos
    t = cursor.decimal()
    cursor.expect(P_PREFIX)
    p_pos = cursor.pos
    p = cursor.decimal()

    _check_cost("m", m, m_pos)
    _check_cost("t", t, t_pos)
    if p < 1 or p > MAX_PARALLELISM:
        raise RangeViolationError(
            f"p must be between 1 and {MAX_PARALLELISM}", field="p", position=p_pos
        )
    if m < (p << 3):
        raise RangeViolationError(
            f"m must be at least {MEMORY_PER_LANE} * p", field="m", position=m_pos
        )

    key_id = cursor.binary(KEY_ID_CAPACITY) if cursor.accept(KEY_ID_PREFIX) else b""
    associated_data = (
        cursor.binary(ASSOCIATED_DATA_CAPACITY) if cursor.accept(DATA_PREFIX) else b""
    )
    if cursor.at_end():
        return ParsedRecord(
            m=m, t=t, p=p, key_id=key_id, associated_data=associated_data
        )

    cursor.expect(SEPARATOR)
    salt_pos = cursor.pos
    salt = cursor.binary(SALT_CAPACITY)
    if len(salt) < SALT_MIN_LENGTH:
        raise RangeViolationError(
            f"salt must be at least {SALT_MIN_LENGTH} bytes",
            field="salt",
            position=salt_pos,
        )
    if cursor.at_end():
        return ParsedRecord(
            m=m, t=t, p=p, key_id=key_id, associated_data=associated_data, salt=salt
        )

    cursor.expect(SEPARATOR)
    output_pos = cursor.pos
    output = cursor.binary(OUTPUT_CAPACITY)
    if len(output) < OUTPUT_MIN_LENGTH:
        raise RangeViolationError(
            f"output must be at least {OUTPUT_MIN_LENGTH} bytes",
            field="output",
            position=output_pos,
        )
    if not cursor.at_end():
        raise TrailingDataError("Unexpected data after output", position=cursor.pos)

    return ParsedRecord(
        m=m,
        t=t,
        p=p,
        key_id=key_id,
        associated_data=associated_data,
        salt=salt,
        output=output,
    )


def decode(text: str | bytes) -> ParsedRecord:
    """Decode a hash string into a ParsedRecord.

    Raises a ParseError subclass describing the first problem found.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    try:
        return _decode(data)
    except ParseError as e:
        logger.debug(f"Rejected hash string: {e.kind.value} at offset {e.position}")
        raise


def is_valid(text: str | bytes) -> bool:
    try:
        decode(text)
    except ParseError:
        return False
    return True


def _write_binary(buf: OutputBuffer, value: bytes) -> None:
    buf.write(encode_base64(value, capacity=buf.remaining))


def encode(record: ParsedRecord, capacity: int | None = None) -> str:
    """Encode a record into its hash string.

    ``capacity`` is the destination size including a terminator slot, so
    the result must be strictly shorter than it. Each write is checked
    before it happens and CapacityError is raised at the first one that
    does not fit. Ranges are not re-validated here.
    """
    if capacity is None:
        capacity = MAX_HASH_STRING_LENGTH + 1
    buf = OutputBuffer(capacity)

    buf.write(ALGORITHM_PREFIX + PARAMS_PREFIX)
    buf.write(str(record.m))
    buf.write(T_PREFIX)
    buf.write(str(record.t))
    buf.write(P_PREFIX)
    buf.write(str(record.p))
    if record.has_key_id:
        buf.write(KEY_ID_PREFIX)
        _write_binary(buf, record.key_id)
    if record.has_associated_data:
        buf.write(DATA_PREFIX)
        _write_binary(buf, record.associated_data)
    if len(record.salt) == 0:
        return buf.getvalue()

    buf.write(SEPARATOR)
    _write_binary(buf, record.salt)
    if len(record.output) == 0:
        return buf.getvalue()

    buf.write(SEPARATOR)
    _write_binary(buf, record.output)
    return buf.getvalue()


def encoded_length(record: ParsedRecord) -> int:
    """Exact length of ``encode(record)``, without the terminator."""
    length = len(ALGORITHM_PREFIX + PARAMS_PREFIX + T_PREFIX + P_PREFIX)
    length += len(str(record.m)) + len(str(record.t)) + len(str(record.p))
    if record.has_key_id:
        length += len(KEY_ID_PREFIX) + b64_length(len(record.key_id))
    if record.has_associated_data:
        length += len(DATA_PREFIX) + b64_length(len(record.associated_data))
    if record.salt:
        length += len(SEPARATOR) + b64_length(len(record.salt))
        if record.output:
            length += len(SEPARATOR) + b64_length(len(record.output))
    return length
